# admin_dashboard/models/__init__.py
# Import all models so SQLAlchemy can resolve relationships

from admin_dashboard.db.base_class import Base
from admin_dashboard.models.event import Event
from admin_dashboard.models.waitlist import WaitlistEntry
from admin_dashboard.models.ticket import Ticket
from admin_dashboard.models.role import Role
