import asyncio
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

import discord

from blog_list import BlogCard, BlogList
from blog_list.config import Settings, load_settings
from blog_list.render import NO_RESULTS_MESSAGE

logger = logging.getLogger("discord_bot")

COMMAND = "!blogs"
MAX_MESSAGE_CHARS = 2000

HELP_TEXT = (
    "Usage:\n"
    "`!blogs` show the current page\n"
    "`!blogs search <term>` search titles\n"
    "`!blogs category [name]` filter by category (empty clears)\n"
    "`!blogs sort [date|reading_time|category]` sort (empty clears)\n"
    "`!blogs more` load 10 more\n"
    "`!blogs categories` list categories"
)


def _truncate(text: str) -> str:
    # 디스코드 메시지는 2000자를 넘을 수 없습니다.
    if len(text) > MAX_MESSAGE_CHARS:
        return text[: MAX_MESSAGE_CHARS - 3] + "..."
    return text


def format_card(card: BlogCard) -> str:
    text = f"**{card.title}**\n"
    text += f"*By {card.author} · {card.category} · {card.reading_time_label} · {card.published}*\n"
    text += f"{card.excerpt}\n"
    if card.image:
        text += f"<{card.image}>\n"
    return text


class DiscordListView:
    """BlogListView that buffers rendered text until the bot sends it."""

    def __init__(self) -> None:
        self.outbox: List[str] = []
        self.loading = False

    def display(self, cards: Sequence[BlogCard]) -> None:
        if not cards:
            self.outbox.append(NO_RESULTS_MESSAGE)
            return
        # 2000자 제한에 맞춰 카드 단위로 메시지를 나눕니다.
        chunk = f"📰 {len(cards)} blog posts\n\n"
        in_chunk = 0
        for card in cards:
            text = format_card(card) + "\n"
            if in_chunk and len(chunk) + len(text) > MAX_MESSAGE_CHARS:
                self.outbox.append(chunk.rstrip("\n"))
                chunk, in_chunk = "", 0
            chunk += text
            in_chunk += 1
        self.outbox.append(chunk.rstrip("\n"))

    def show_loading(self) -> None:
        self.loading = True

    def hide_loading(self) -> None:
        self.loading = False

    def show_error(self, message: str) -> None:
        self.outbox.append(message)

    def clear(self) -> None:
        self.outbox.clear()

    def flush(self) -> List[str]:
        messages = [_truncate(m) for m in self.outbox]
        self.outbox.clear()
        return messages


@dataclass
class ChannelSession:
    """Blog list state for one channel; the feed is loaded on first use."""
    blog_list: BlogList
    view: DiscordListView = field(default_factory=DiscordListView)
    loaded: bool = False
    load_task: Optional["asyncio.Future[Tuple[bool, List[str]]]"] = None

    @classmethod
    def create(cls, settings: Settings) -> "ChannelSession":
        view = DiscordListView()
        return cls(blog_list=BlogList.from_settings(view, settings), view=view)


async def _first_load(session: ChannelSession) -> Tuple[bool, List[str]]:
    loaded = await session.blog_list.init()
    return loaded, session.view.flush()


async def _ensure_loaded(session: ChannelSession) -> Optional[List[str]]:
    """
    Load the feed once per session; concurrent first commands share one load.
    Returns the error messages when loading failed, None otherwise.
    """
    if session.loaded:
        return None
    task = session.load_task
    if task is None:
        task = asyncio.ensure_future(_first_load(session))
        session.load_task = task
    try:
        loaded, messages = await asyncio.shield(task)
    finally:
        if session.load_task is task and task.done():
            session.load_task = None
    if not loaded:
        return messages
    session.loaded = True
    return None


async def handle_command(session: ChannelSession, content: str) -> List[str]:
    """Run one `!blogs` command and return the messages to send back."""
    parts = content.split(maxsplit=2)
    sub = parts[1].lower() if len(parts) > 1 else ""
    arg = parts[2].strip() if len(parts) > 2 else ""
    blogs = session.blog_list

    if sub == "help":
        return [HELP_TEXT]

    errors = await _ensure_loaded(session)
    if errors is not None:
        return errors

    if sub in ("", "list"):
        blogs.render()
    elif sub == "search":
        blogs.set_search_term(arg)
    elif sub == "category":
        blogs.set_category(arg or None)
    elif sub == "sort":
        blogs.set_sort_key(arg)
    elif sub == "more":
        blogs.advance_page()
    elif sub == "categories":
        names = blogs.categories()
        return [", ".join(names) if names else "No categories."]
    else:
        return [HELP_TEXT]

    messages = session.view.flush()
    if blogs.has_more:
        messages.append(f"More posts available: `{COMMAND} more`")
    return messages


class BlogBot(discord.Client):
    def __init__(self, settings: Settings) -> None:
        # 메시지 내용을 읽기 위한 권한
        intents = discord.Intents.default()
        intents.message_content = True
        super().__init__(intents=intents)
        self.settings = settings
        self.sessions: Dict[int, ChannelSession] = {}

    def session_for(self, channel_id: int) -> ChannelSession:
        session = self.sessions.get(channel_id)
        if session is None:
            session = ChannelSession.create(self.settings)
            self.sessions[channel_id] = session
        return session

    async def on_ready(self) -> None:
        """봇이 성공적으로 로그인하면 호출됩니다."""
        logger.info("Logged in as %s", self.user)

    async def on_message(self, message: discord.Message) -> None:
        # 봇 자신의 메시지는 무시합니다.
        if message.author == self.user:
            return
        words = message.content.split(maxsplit=1)
        if not words or words[0] != COMMAND:
            return

        session = self.session_for(message.channel.id)
        async with message.channel.typing():
            replies = await handle_command(session, message.content)
        for reply in replies:
            await message.channel.send(reply)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    # .env 파일에 DISCORD_BOT_TOKEN="YOUR_BOT_TOKEN" 형식으로 토큰을 저장해야 합니다.
    settings = load_settings()
    if not settings.discord_token:
        raise ValueError("DISCORD_BOT_TOKEN is not set. Check your .env file.")
    BlogBot(settings).run(settings.discord_token, log_handler=None)


if __name__ == "__main__":
    main()
