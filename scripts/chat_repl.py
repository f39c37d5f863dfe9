"""Talk to the chat assistant from a terminal."""

from __future__ import annotations

import argparse
from pathlib import Path

from zolarus.config.settings import get_settings
from zolarus.monitoring.logging import configure_logging
from zolarus.nlp.intent import IntentExtractor
from zolarus.services.chat import ChatSession
from zolarus.storage import JsonFileStore, PreferenceStore


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--lang", default=None, help="en, pt, es or fr")
    parser.add_argument("--path", default="/dashboard", help="page the widget is shown on")
    parser.add_argument("--user", default="local-user", help="user id for soft preferences")
    args = parser.parse_args()

    configure_logging()
    settings = get_settings()
    preferences = PreferenceStore(JsonFileStore(Path(settings.storage_path)))
    session = ChatSession(
        IntentExtractor(preferences),
        lang=args.lang or settings.default_lang,
        path=args.path,
        user_id=args.user,
    )
    print(f"Bot: {session.greeting()}")
    print("Try: " + " | ".join(session.chips()))

    while True:
        try:
            user_input = input("You: ").strip()
        except (KeyboardInterrupt, EOFError):
            print("\nExiting.")
            break

        if not user_input:
            continue
        if user_input.lower() in {"exit", "quit"}:
            break

        result = session.send(user_input)
        if result is None:
            continue
        print(f"Bot: {result.reply}")
        if result.nav:
            print(f"  -> {result.nav}")
            session.navigate(result.nav.split("?", 1)[0])


if __name__ == "__main__":
    main()
