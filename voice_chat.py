import asyncio
import logging
from typing import Optional
from fastapi import WebSocket

from chat import ChatPayload, ChatPayloadType

logger = logging.getLogger(__name__)


class VoiceRoom:
    def __init__(self, room_id: str):
        self.room_id = room_id
        self.participants: dict[str, WebSocket] = {}
        self._lock = asyncio.Lock()

    async def add_participant(self, username: str, websocket: WebSocket) -> list[str]:
        """Add a participant. Returns the users dropped because a send to them failed."""
        async with self._lock:
            self.participants[username] = websocket
            logger.info(f"User {username} joined voice room {self.room_id}")
            return await self._broadcast_user_list()

    async def remove_participant(self, username: str) -> list[str]:
        async with self._lock:
            if username not in self.participants:
                return []
            del self.participants[username]
            logger.info(f"User {username} left voice room {self.room_id}")
            return await self._broadcast_user_list()

    async def _broadcast_user_list(self) -> list[str]:
        payload = ChatPayload(
            type=ChatPayloadType.VOICE_USER_LIST,
            users=list(self.participants.keys()),
            room_id=self.room_id
        )
        return await self._broadcast(payload)

    async def _broadcast(self, payload: ChatPayload) -> list[str]:
        disconnected = []
        message = payload.to_json()
        for username, ws in list(self.participants.items()):
            try:
                await ws.send_text(message)
            except Exception as e:
                logger.error(f"Failed to send to {username}: {e}")
                disconnected.append(username)

        for username in disconnected:
            if username in self.participants:
                del self.participants[username]
        return disconnected

    def get_participants(self) -> list[str]:
        return list(self.participants.keys())

    def is_empty(self) -> bool:
        return len(self.participants) == 0


class VoiceChatManager:
    """Tracks which voice room every user is in."""

    def __init__(self):
        self._rooms: dict[str, VoiceRoom] = {}
        self._user_rooms: dict[str, str] = {}
        self._lock = asyncio.Lock()

    async def join_room(self, room_id: str, username: str, websocket: WebSocket) -> VoiceRoom:
        async with self._lock:
            if username in self._user_rooms:
                await self._remove_from_room(self._user_rooms.pop(username), username)

            if room_id not in self._rooms:
                self._rooms[room_id] = VoiceRoom(room_id)

            room = self._rooms[room_id]
            self._user_rooms[username] = room_id
            dropped = await room.add_participant(username, websocket)
            self._forget(room, dropped)

            return room

    async def leave_room(self, username: str) -> None:
        async with self._lock:
            if username in self._user_rooms:
                await self._remove_from_room(self._user_rooms.pop(username), username)

    async def _remove_from_room(self, room_id: str, username: str) -> None:
        room = self._rooms.get(room_id)
        if room is None:
            return
        dropped = await room.remove_participant(username)
        self._forget(room, dropped)

    def _forget(self, room: VoiceRoom, dropped: list[str]) -> None:
        """Drop unreachable users from the user map and delete the room once empty."""
        for username in dropped:
            if self._user_rooms.get(username) == room.room_id:
                del self._user_rooms[username]
        if room.is_empty() and self._rooms.get(room.room_id) is room:
            del self._rooms[room.room_id]
            logger.info(f"Room {room.room_id} deleted (empty)")

    def get_user_room(self, username: str) -> Optional[str]:
        return self._user_rooms.get(username)

    def get_room_participants_for(self, username: str) -> Optional[list[str]]:
        """Members of the room the user is in, None if the user is not in voice."""
        room_id = self._user_rooms.get(username)
        if room_id is None or room_id not in self._rooms:
            return None
        return self._rooms[room_id].get_participants()

    def get_all_rooms(self) -> dict[str, list[str]]:
        return {room_id: room.get_participants() for room_id, room in self._rooms.items()}
