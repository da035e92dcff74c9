"""Tool definitions, grouped by CRM domain."""

from . import companies, deals, groups, interactions, notes, people, reminders, users, webhooks

ALL_TOOLS = [
    *people.TOOLS,
    *companies.TOOLS,
    *groups.TOOLS,
    *notes.TOOLS,
    *reminders.TOOLS,
    *users.TOOLS,
    *interactions.TOOLS,
    *webhooks.TOOLS,
    *deals.TOOLS,
]

__all__ = ["ALL_TOOLS"]
