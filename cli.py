# Role: Local developer CLI to talk to the Dialogflow agent without the HTTP server.
# Each line is sent as its own detect-intent call, exactly like the relay endpoint does.

from __future__ import annotations

import asyncio
import logging

import intentbridge.config
intentbridge.config.load_env()

from intentbridge.config import get_settings
from intentbridge.nlu.dialogflow_client import DialogflowIntentClient, NoIntentMatchedError


async def run() -> None:
    # 1) Build one client from settings
    # 2) Route user input -> Dialogflow -> print fulfillment text
    # 3) Close the gRPC channel on exit
    settings = get_settings()
    if settings.debug:
        logging.basicConfig(level=logging.DEBUG)

    print("Intent Bridge CLI")
    print("Commands: /exit")
    print("-" * 50)

    client = DialogflowIntentClient(
        project_id=settings.project_id,
        credentials_path=settings.credentials_path,
    )
    print(f"project: {client.project_id}")

    try:
        while True:
            try:
                user_message = input("\nYou: ").strip()
            except (EOFError, KeyboardInterrupt):
                print("\nBye!")
                return

            if not user_message:
                continue

            if user_message.lower() in {"/exit", "exit", "quit", "/quit"}:
                print("Bye!")
                return

            try:
                result = await client.detect_intent(user_message)
            except NoIntentMatchedError as e:
                print(f"\nBot: ({e})")
                continue

            print(f"\nBot: {result.bot}")
    finally:
        await client.close()


def main() -> None:
    asyncio.run(run())


if __name__ == "__main__":
    main()
