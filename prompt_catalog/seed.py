"""
Initial editorial dataset and the bootstrap that loads it.

seed_database() only runs when the store holds no category at all; as soon as
any category exists (whatever its slug) it leaves the store untouched.
"""

from __future__ import annotations

import logging

from prompt_catalog.schemas import PromptCreate
from prompt_catalog.storage import Storage

logger = logging.getLogger(__name__)

SEED_DATA = {
    "emails": {
        "title": "Email Management",
        "icon": "Mail",
        "color": "bg-blue-500",
        "description": "Templates for professional communication",
        "prompts": [
            {
                "title": "Professional Client Follow-up",
                "description": "Follow up with clients after meetings or proposals",
                "content": "Write a professional follow-up email to a client after our meeting about [topic]. Include: a thank you for their time, key points discussed, next steps, and a clear call-to-action. Keep the tone friendly but professional.",
            },
            {
                "title": "Customer Service Response",
                "description": "Respond to customer complaints or inquiries",
                "content": "Draft a customer service email response to address [customer complaint/issue]. Show empathy, acknowledge the problem, explain the solution or next steps, and offer compensation if appropriate. Maintain a helpful and apologetic tone.",
            },
            {
                "title": "Sales Outreach Email",
                "description": "Reach out to potential customers",
                "content": "Create a cold outreach email to introduce our [product/service] to [target audience]. Highlight 3 key benefits, include a compelling subject line, keep it under 150 words, and end with a low-pressure call-to-action.",
            },
            {
                "title": "Meeting Request",
                "description": "Schedule meetings with clients or partners",
                "content": "Write an email requesting a meeting with [person/company] to discuss [topic]. Explain the purpose clearly, suggest 2-3 time slots, and keep it concise and respectful of their time.",
            },
            {
                "title": "Newsletter Template",
                "description": "Create engaging customer newsletters",
                "content": "Create a monthly newsletter for our [business type] customers. Include: a friendly greeting, 3 main updates/news items, a featured product/service, and a call-to-action. Make it conversational and engaging.",
            },
        ],
    },
    "finances": {
        "title": "Financial Management",
        "icon": "DollarSign",
        "color": "bg-green-500",
        "description": "Prompts for budgeting and financial analysis",
        "prompts": [
            {
                "title": "Budget Planning",
                "description": "Create budgets for projects or periods",
                "content": "Help me create a detailed budget for [project/time period]. My revenue/income is [amount], and I need to allocate funds across: [list categories like payroll, marketing, supplies, etc.]. Provide a breakdown with percentages and recommendations.",
            },
            {
                "title": "Expense Analysis",
                "description": "Analyze and categorize business expenses",
                "content": "Analyze these business expenses and categorize them: [paste expense list]. Identify areas where I might be overspending and suggest cost-cutting opportunities without compromising quality.",
            },
            {
                "title": "Invoice Creation",
                "description": "Generate professional invoices",
                "content": "Create a professional invoice for [client name] for [services/products provided]. Include: invoice number [#], date [date], itemized list of services/products, quantities, rates, subtotal, tax, and total. Add payment terms of [X days].",
            },
        ],
    },
    "reports": {
        "title": "Report Writing",
        "icon": "FileText",
        "color": "bg-purple-500",
        "description": "Templates for business reports and summaries",
        "prompts": [
            {
                "title": "Monthly Performance Report",
                "description": "Summarize monthly business performance",
                "content": "Create a monthly performance report for [month]. Include sections on: sales/revenue, customer metrics, operational highlights, challenges faced, and goals for next month. Here's the data: [paste your data].",
            },
            {
                "title": "Project Status Update",
                "description": "Update stakeholders on project progress",
                "content": "Write a project status report for [project name]. Cover: current progress (%), completed milestones, upcoming tasks, budget status, risks/issues, and next steps. Keep it concise and actionable.",
            },
        ],
    },
    "scheduling": {
        "title": "Scheduling & Planning",
        "icon": "Calendar",
        "color": "bg-orange-500",
        "description": "Tools for time management and planning",
        "prompts": [
            {
                "title": "Weekly Team Schedule",
                "description": "Organize team schedules and shifts",
                "content": "Create a weekly schedule for our team of [number] people covering [hours/days]. Roles needed: [list roles]. Constraints: [any limitations like availability, max hours]. Ensure fair distribution and adequate coverage.",
            },
            {
                "title": "Project Timeline",
                "description": "Plan project timelines and milestones",
                "content": "Create a project timeline for [project name] that needs to be completed by [deadline]. Break down into phases, assign realistic timeframes, identify dependencies, and highlight critical milestones. Total duration: [X weeks/months].",
            },
            {
                "title": "Meeting Agenda",
                "description": "Structure productive meeting agendas",
                "content": "Create a meeting agenda for [meeting purpose] scheduled for [duration]. Topics to cover: [list topics]. Include time allocations for each item, expected outcomes, and any pre-work needed from attendees.",
            },
        ],
    },
    "marketing": {
        "title": "Marketing & Sales",
        "icon": "Megaphone",
        "color": "bg-pink-500",
        "description": "Prompts for marketing campaigns and content",
        "prompts": [
            {
                "title": "Social Media Post",
                "description": "Create engaging social media content",
                "content": "Write a [platform] post about [topic/product/announcement]. Target audience: [describe audience]. Goal: [engagement/sales/awareness]. Include a hook, value proposition, and call-to-action. Add relevant hashtag suggestions.",
            },
            {
                "title": "Product Description",
                "description": "Write compelling product descriptions",
                "content": "Write a product description for [product name]. Key features: [list features]. Target customer: [describe]. Benefits: [list benefits]. Make it persuasive, highlight what makes it unique, and optimize for both customers and SEO.",
            },
            {
                "title": "Marketing Campaign Ideas",
                "description": "Brainstorm marketing campaign concepts",
                "content": "Generate 5 marketing campaign ideas for [product/service/event]. Target audience: [describe]. Budget: [amount/range]. Goals: [awareness/sales/engagement]. Include campaign themes, channels, and expected outcomes.",
            },
        ],
    },
    "operations": {
        "title": "Business Operations",
        "icon": "Settings",
        "color": "bg-gray-500",
        "description": "Daily management and operations prompts",
        "prompts": [
            {
                "title": "Standard Operating Procedure (SOP)",
                "description": "Create clear procedures for team tasks",
                "content": "Write a detailed Standard Operating Procedure for [task name]. Include: purpose, equipment needed, step-by-step instructions, safety precautions, and troubleshooting tips.",
            },
            {
                "title": "Inventory Management Strategy",
                "description": "Optimize stock levels and ordering",
                "content": "Develop an inventory management plan for [business type]. Focus on reducing waste, optimizing reorder points for [key products], and managing lead times from [suppliers].",
            },
        ],
    },
    "hr": {
        "title": "HR & Team Management",
        "icon": "Users",
        "color": "bg-indigo-500",
        "description": "Resources for human resources and team building",
        "prompts": [
            {
                "title": "Job Posting",
                "description": "Create attractive job postings",
                "content": "Write a job posting for a [job title] role at our [company description]. Responsibilities: [list key duties]. Qualifications: [list requirements]. Highlight our company culture and benefits to attract top talent.",
            },
            {
                "title": "Employee Feedback",
                "description": "Structure constructive feedback",
                "content": "Draft constructive feedback for an employee regarding [issue/performance area]. Use the Situation-Behavior-Impact (SBI) model. Be specific, supportive, and focus on improvement and professional growth.",
            },
        ],
    },
}


def seed_database(storage: Storage, data: dict | None = None) -> bool:
    """Load the editorial dataset if no category exists yet.

    Returns True when data was inserted, False when the store was already
    populated.
    """
    if storage.count_categories() > 0:
        logger.debug("Categories already present; skipping seed")
        return False

    data = SEED_DATA if data is None else data
    logger.info("Seeding database with initial data...")
    for slug, entry in data.items():
        category = storage.create_category(
            name=entry["title"],
            slug=slug,
            description=entry["description"],
            icon=entry["icon"],
            color=entry["color"],
        )
        for prompt in entry["prompts"]:
            storage.create_prompt(
                PromptCreate(
                    category_id=category.id,
                    title=prompt["title"],
                    description=prompt["description"],
                    content=prompt["content"],
                    is_favorite=False,
                )
            )
    logger.info(
        "Seeding complete: %d categories, %d prompts",
        storage.count_categories(),
        storage.count_prompts(),
    )
    return True
