from contextlib import ExitStack, contextmanager

from fastapi.testclient import TestClient

from main import app


@contextmanager
def login(client, username):
    with client.websocket_connect("/ws") as chat:
        chat.send_text(username)
        userlist = chat.receive_json()
        welcome = chat.receive_json()
        assert userlist["type"] == "userlist"
        assert username in userlist["users"]
        assert welcome == {"type": "info", "text": f"Welcome, {username}!", "timestamp": welcome["timestamp"]}
        yield chat


def test_root_status():
    with TestClient(app) as client:
        assert client.get("/").json() == {"status": "ok"}


def test_empty_username_is_rejected():
    with TestClient(app) as client:
        with client.websocket_connect("/ws") as chat:
            chat.send_text("   ")
            payload = chat.receive_json()
            assert payload["type"] == "error"
            assert payload["text"] == "Username cannot be empty."


def test_help_without_voice_room():
    with TestClient(app) as client:
        with login(client, "help-user") as chat:
            chat.send_text("!sq")
            payload = chat.receive_json()
            assert payload["type"] == "info"
            assert payload["text"].startswith("I will fetch all users in voice chat")


def test_unknown_command_is_reported():
    with TestClient(app) as client:
        with login(client, "unknown-user") as chat:
            chat.send_text("!dance")
            payload = chat.receive_json()
            assert payload["type"] == "error"
            assert payload["text"].startswith("Unknown command: !dance")


def test_voice_requires_chat_login():
    with TestClient(app) as client:
        with client.websocket_connect("/ws/voice/nowhere") as voice:
            voice.send_text("ghost")
            payload = voice.receive_json()
            assert payload["type"] == "error"


def test_squad_uses_voice_room_members():
    with TestClient(app) as client:
        with login(client, "Ann") as chat:
            with client.websocket_connect("/ws/voice/room-a") as voice:
                voice.send_text("Ann")
                joined = voice.receive_json()
                assert joined["type"] == "user_list"
                assert joined["room_id"] == "room-a"
                assert joined["users"] == ["Ann"]

                assert client.get("/api/voice/rooms").json()["room-a"] == ["Ann"]

                chat.send_text("!sq duo Bo")
                roster = chat.receive_json()
                assert roster["type"] == "info"
                lines = roster["text"].splitlines()
                assert lines[0] == "-- **Duos** --"
                assert sorted(lines[1][len("**1**. "):].split(", ")) == ["Ann", "Bo"]

                chat.send_text("!sq pentad")
                fallback = chat.receive_json()
                assert fallback["type"] == "error"
                assert fallback["text"].startswith("Jag fattar inte")


def test_plain_message_is_broadcast():
    with TestClient(app) as client:
        with login(client, "talker") as chat:
            chat.send_text("hello there")
            payload = chat.receive_json()
            assert payload["type"] == "message"
            assert payload["text"] == "talker: hello there"


def test_switching_voice_rooms_and_disconnecting():
    with TestClient(app) as client:
        with login(client, "mover") as chat:
            with ExitStack() as second:
                with client.websocket_connect("/ws/voice/room-x") as first_voice:
                    first_voice.send_text("mover")
                    assert first_voice.receive_json()["users"] == ["mover"]

                    second_voice = second.enter_context(client.websocket_connect("/ws/voice/room-y"))
                    second_voice.send_text("mover")
                    assert second_voice.receive_json()["room_id"] == "room-y"

                    rooms = client.get("/api/voice/rooms").json()
                    assert "room-x" not in rooms
                    assert rooms["room-y"] == ["mover"]

                # Closing the stale room-x socket must not pull the user out of room-y
                assert client.get("/api/voice/rooms").json()["room-y"] == ["mover"]

                chat.send_text("!sq duo")
                roster = chat.receive_json()
                assert roster["text"] == "-- **Duos** --\n**1**. mover\n"

            assert "room-y" not in client.get("/api/voice/rooms").json()
