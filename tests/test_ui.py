"""Smoke tests for the Textual chat window."""
from textual.widgets import Input, TextArea

from conftest import FakeBridge, chat_reply
from lmchat.config import ChatConfig, InMemoryConfigStore
from lmchat.conversation import ConversationController
from lmchat.ui import ChatApp
from lmchat.ui.config import LogLevel
from lmchat.ui.screens import NoticeScreen, SettingsScreen
from lmchat.ui.widgets import ChatHistoryWidget, ClickableMessage, InputHistory


async def test_send_button_round_trip():
    bridge = FakeBridge(chat_reply("hi there"))
    controller = ConversationController(bridge, InMemoryConfigStore())
    app = ChatApp(controller)

    async with app.run_test() as pilot:
        app.query_one("#chat-input", TextArea).text = "hello"
        await pilot.pause()
        await pilot.click("#send-btn")
        await app.workers.wait_for_complete()
        await pilot.pause()

        assert [m.content for m in controller.transcript] == ["hello", "hi there"]
        assert app.query_one("#chat-input", TextArea).text == ""
        chat = app.query_one("#chat-history", ChatHistoryWidget)
        assert len(chat.query(ClickableMessage)) == 2
        assert chat.get_last_response() == "hi there"


async def test_clear_chat_action():
    bridge = FakeBridge(chat_reply("hi"))
    controller = ConversationController(bridge, InMemoryConfigStore())
    app = ChatApp(controller)

    async with app.run_test() as pilot:
        await controller.send("hello")
        await pilot.pause()

        app.action_clear_chat()
        await pilot.pause()

        assert controller.transcript == ()
        assert len(app.query(ClickableMessage)) == 0


async def test_settings_save_updates_controller():
    store = InMemoryConfigStore()
    controller = ConversationController(FakeBridge(), store)
    app = ChatApp(controller)

    async with app.run_test() as pilot:
        app.action_open_settings()
        await pilot.pause()
        assert isinstance(app.screen, SettingsScreen)

        app.screen.query_one("#base-url", Input).value = " http://gpu:1234 "
        app.screen.query_one("#model", Input).value = "qwen"
        await pilot.click("#btn-save")
        await pilot.pause()

        assert controller.config == ChatConfig(base_url="http://gpu:1234", model="qwen")
        assert store.load() == controller.config
        assert controller.transcript[-1].content.startswith("Settings saved")


async def test_failed_save_shows_notice():
    store = InMemoryConfigStore(fail_saves=True)
    controller = ConversationController(FakeBridge(), store)
    app = ChatApp(controller)

    async with app.run_test() as pilot:
        controller.save_configuration(ChatConfig(model="qwen"))
        await pilot.pause()

        assert isinstance(app.screen, NoticeScreen)
        assert controller.config.model == "qwen"


class TestInputHistory:
    def test_walks_back_and_forward(self):
        history = InputHistory()
        for entry in ("one", "two", "two", "three"):
            history.push(entry)

        assert [history.back(), history.back(), history.back(), history.back()] == [
            "three", "two", "one", "one",
        ]
        assert history.forward() == "two"
        assert history.forward() == "three"
        assert history.forward() == ""
        assert history.forward() is None

    def test_empty_history(self):
        assert InputHistory().back() is None

    def test_is_bounded(self):
        history = InputHistory(max_size=2)
        for entry in ("a", "b", "c"):
            history.push(entry)

        assert history.back() == "c"
        assert history.back() == "b"
        assert history.back() == "b"


class TestLogLevel:
    def test_from_string(self):
        assert LogLevel.from_string("info") is LogLevel.INFO
        assert LogLevel.from_string(" WARN ") is LogLevel.WARNING
        assert LogLevel.from_string("chatty") is LogLevel.DEBUG
