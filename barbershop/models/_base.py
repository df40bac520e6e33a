from __future__ import annotations

import time

from sqlalchemy import BigInteger, Column


def now_ms() -> int:
    return int(time.time() * 1000)


class CreatedAtMixin:
    # milissegundos desde a epoch, atribuído no insert
    created_at = Column(BigInteger, nullable=False, default=now_ms)

    def to_dict(self) -> dict:
        return {column.name: getattr(self, column.name) for column in self.__table__.columns}
