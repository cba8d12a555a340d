"""
SQLAlchemy models for the prompt catalog (Flask-SQLAlchemy).

Three tables:
- components: optional secondary classification of a prompt ("Email", "Document")
- categories: editorial grouping with a unique slug and display metadata
- prompts: the stored text templates; category is required, component is optional

Wire serialisation lives in serializers.py so the models stay pure data shape.
"""

from prompt_catalog.extensions import db


class Component(db.Model):
    __tablename__ = "components"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.Text, nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"<Component id={self.id} name={self.name}>"


class Category(db.Model):
    __tablename__ = "categories"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.Text, nullable=False)
    slug = db.Column(db.Text, nullable=False, unique=True, index=True)
    description = db.Column(db.Text, nullable=False)
    # Lucide icon name, resolved client-side
    icon = db.Column(db.Text, nullable=False)
    # Tailwind color class
    color = db.Column(db.Text, nullable=False)

    prompts = db.relationship(
        "Prompt",
        back_populates="category",
        lazy="select",
        order_by="Prompt.id",
    )

    def __repr__(self) -> str:
        return f"<Category id={self.id} slug={self.slug}>"


class Prompt(db.Model):
    __tablename__ = "prompts"

    id = db.Column(db.Integer, primary_key=True)
    category_id = db.Column(
        db.Integer, db.ForeignKey("categories.id"), nullable=False, index=True
    )
    component_id = db.Column(
        db.Integer, db.ForeignKey("components.id"), nullable=True, index=True
    )
    title = db.Column(db.Text, nullable=False)
    description = db.Column(db.Text, nullable=False)
    content = db.Column(db.Text, nullable=False)
    is_favorite = db.Column(db.Boolean, nullable=True, default=False)
    # "metadata" is reserved on declarative classes; keep the column name only
    metadata_ = db.Column("metadata", db.Text, nullable=True)

    category = db.relationship("Category", back_populates="prompts", lazy="select")
    component = db.relationship("Component", lazy="select")

    def __repr__(self) -> str:
        return f"<Prompt id={self.id} category_id={self.category_id} title={self.title}>"
