from .models import ChatPayload, ChatPayloadType

__all__ = [
    "ChatPayload",
    "ChatPayloadType",
]
