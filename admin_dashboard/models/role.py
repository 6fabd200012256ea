from sqlalchemy import Column, String

from admin_dashboard.db.base_class import Base


class Role(Base):
    __tablename__ = "roles"

    email = Column(String, primary_key=True)
    # Comma-separated role names, e.g. "admin,speaker"
    roles = Column(String, nullable=True)

    def has_role(self, role: str) -> bool:
        if not self.roles:
            return False
        return role in [r.strip() for r in self.roles.split(",")]
