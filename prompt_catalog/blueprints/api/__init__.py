from flask import Blueprint

api_bp = Blueprint("api", __name__)

# ビューを登録するために import
from . import routes  # noqa: E402,F401
