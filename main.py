from fastapi import FastAPI, WebSocket, WebSocketDisconnect
import uvicorn
from datetime import datetime
import logging
from chat import ChatPayload, ChatPayloadType
from command import CommandFactory, CommandContext, CommandParser
from command.factory import register_builtin_commands
from config import BotConfig, load_token
from voice_chat import VoiceChatManager

settings = BotConfig.from_env()

logging.basicConfig(
    level=settings.log_level,
    format="| %(asctime)s | %(levelname)s | %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI()

# Register built-in commands
register_builtin_commands()

# In-memory store for connections and usernames
user_map: dict[WebSocket, str] = {}
current_users: set[str] = set()
voice_manager = VoiceChatManager()


@app.on_event("startup")
async def startup_event():
    """Load the bot credential on application startup."""
    token = load_token(settings.token_path, required=settings.require_token)
    logger.info("Booting up bot")
    logger.info(f"Token {'loaded' if token else 'not configured'}")
    logger.info("Bot up and running")


def get_timestamp() -> str:
    """Get current time in HH:mm:ss format"""
    return datetime.now().strftime("%H:%M:%S")


@app.get("/")
async def root():
    return {"status": "ok"}


@app.get("/api/voice/rooms")
async def get_voice_rooms():
    """Snapshot of every voice room and its participants."""
    return voice_manager.get_all_rooms()


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket):
    await websocket.accept()
    try:
        while True:
            data = await websocket.receive_text()
            # First message is treated as username if not yet set
            if websocket not in user_map:
                username = data.strip()
                if not username:
                    await send_payload(websocket, ChatPayloadType.ERROR, "Username cannot be empty.")
                    continue
                if username in current_users:
                    await send_payload(websocket, ChatPayloadType.ERROR, "Username already taken. Choose another.")
                    continue
                user_map[websocket] = username
                current_users.add(username)
                await broadcast_user_list()
                await send_payload(websocket, ChatPayloadType.INFO, f"Welcome, {username}!")
            else:
                username = user_map[websocket]
                message = data.strip()
                if message:
                    if CommandParser.is_command(message, settings.command_prefix):
                        await handle_command(websocket, username, message)
                    else:
                        await broadcast_message(f"{username}: {message}")
    except WebSocketDisconnect:
        if websocket in user_map:
            username = user_map.pop(websocket)
            current_users.discard(username)
            await broadcast_user_list()
        logger.info("Client disconnected")


@app.websocket("/ws/voice/{room_id}")
async def voice_endpoint(websocket: WebSocket, room_id: str):
    await websocket.accept()
    username = None
    try:
        username = (await websocket.receive_text()).strip()
        if username not in current_users:
            await send_payload(websocket, ChatPayloadType.ERROR, "Log in to text chat before joining voice.")
            await websocket.close()
            return
        await voice_manager.join_room(room_id, username, websocket)
        while True:
            # Keep the presence alive until the client disconnects
            await websocket.receive_text()
    except WebSocketDisconnect:
        if username and voice_manager.get_user_room(username) == room_id:
            await voice_manager.leave_room(username)
        logger.info(f"Voice client {username} disconnected from {room_id}")


async def send_payload(websocket: WebSocket, payload_type: ChatPayloadType, text: str):
    await websocket.send_text(ChatPayload(type=payload_type, text=text).to_json())


async def broadcast_user_list():
    payload = ChatPayload(type=ChatPayloadType.USERLIST, users=list(current_users)).to_json()
    for ws in list(user_map.keys()):
        await ws.send_text(payload)


async def broadcast_message(message: str):
    payload = ChatPayload(type=ChatPayloadType.MESSAGE, text=message, timestamp=get_timestamp()).to_json()
    for ws in list(user_map.keys()):
        await ws.send_text(payload)


async def handle_command(websocket: WebSocket, username: str, message: str):
    """Parse and execute a command."""
    try:
        command_name, args = CommandParser.parse(message, settings.command_prefix)
        if not command_name:
            await send_payload(
                websocket,
                ChatPayloadType.ERROR,
                f"Empty command. Use {settings.command_prefix}help for available commands."
            )
            return

        try:
            command = CommandFactory.create(command_name)
        except KeyError:
            await send_payload(
                websocket,
                ChatPayloadType.ERROR,
                f"Unknown command: {settings.command_prefix}{command_name}. "
                f"Use {settings.command_prefix}help for available commands."
            )
            return

        is_valid, error_msg = command.validate(args)
        if not is_valid:
            await send_payload(websocket, ChatPayloadType.ERROR, f"Invalid arguments: {error_msg}")
            return

        context = CommandContext(
            username=username,
            raw_message=message,
            voice_room=voice_manager.get_user_room(username),
            voice_participants=voice_manager.get_room_participants_for(username),
            config=settings
        )

        response = await command.execute(context, args)
        await send_payload(websocket, ChatPayloadType(response.response_type), response.message)

    except Exception as e:
        logger.error(f"Command execution error: {e}")
        await send_payload(websocket, ChatPayloadType.ERROR, f"Command execution error: {str(e)}")


if __name__ == "__main__":
    uvicorn.run("main:app", host=settings.host, port=settings.port, reload=True)
