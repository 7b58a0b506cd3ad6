"""ORM Models — SQLAlchemy declarative models for Chat and Message.

Invariants:
    - All models inherit from Base (db/base.py)
    - Chat is the aggregate root; messages are scoped by chat_id

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from chat_api.models.chat import Chat  # noqa: F401
from chat_api.models.message import Message  # noqa: F401
