# admin_dashboard/db/base_class.py

from sqlalchemy.orm import declarative_base

# All models inherit from this single declarative base.
Base = declarative_base()
