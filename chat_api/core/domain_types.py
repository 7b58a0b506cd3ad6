"""Domain Types — identity types and bounds shared across the codebase.

Invariants:
    - ChatId, MessageId wrap positive ints — never use bare int for ids in services
    - All numeric bounds live here (no magic numbers in routes or services)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - MAX_ID matches a 32-bit signed INTEGER column: larger path ids are rejected as
      bad input instead of overflowing in the driver
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ChatId = NewType("ChatId", int)
MessageId = NewType("MessageId", int)

MAX_ID = 2_147_483_647


# ─── Bounds ──────────────────────────────────────────────────────

MAX_TITLE_LENGTH = 200
MAX_TEXT_LENGTH = 5000

DEFAULT_MESSAGE_LIMIT = 20
MAX_MESSAGE_LIMIT = 100
