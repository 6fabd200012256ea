from typing import Optional

from sqlalchemy.orm import Session

from admin_dashboard.models.role import Role


class CRUDRole:

    def get_by_email(self, db: Session, *, email: str) -> Optional[Role]:
        return db.query(Role).filter(Role.email == email).first()


role = CRUDRole()
