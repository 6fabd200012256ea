# admin_dashboard/crud/__init__.py

from .crud_event import event
from .crud_role import role
from .crud_ticket import ticket
from .crud_waitlist import waitlist
