# =============================================================================
# main.py  —  Entry Point for the ZIP-code Weather Assistant
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Loads .env (provider API key, optional WEATHER_* settings)
#   2. Creates the Google ADK agent (agent/weather_agent.py)
#   3. Sets up an interactive session
#   4. Sends each question to the agent, which calls the MCP weather tools
#   5. Prints the agent's answer
#
# GOOGLE ADK CONCEPTS USED:
#   - Runner: Manages the agent's execution lifecycle
#   - SessionService: Tracks conversation state across turns
#   - Content/Part: ADK's message format
#   - Event stream: Real-time updates as the agent thinks and acts
# =============================================================================

import asyncio

from dotenv import load_dotenv

# Load environment variables from .env before anything reads them.
# LiteLlm reads the provider key (e.g. OPENROUTER_API_KEY) when it
# initializes, and the tool subprocess inherits WEATHER_HTTP_TIMEOUT and
# WTTR_BASE_URL from this process.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.weather_agent import create_agent

APP_NAME = "zip_weather"
USER_ID = "demo_user"


async def run_agent():
    """Run the weather assistant interactively until the user quits."""

    print("=" * 70)
    print("  ZIP-CODE WEATHER ASSISTANT")
    print("  Powered by Google ADK + LiteLlm + FastMCP + wttr.in")
    print("=" * 70)
    print("\n🔧 Initializing agent...")
    agent = create_agent()

    session_service = InMemorySessionService()

    runner = Runner(
        agent=agent,
        app_name=APP_NAME,
        session_service=session_service,
    )

    session = await session_service.create_session(
        app_name=APP_NAME,
        user_id=USER_ID,
    )

    print("✅ Agent initialized and ready!\n")
    print("💬 Ask about the weather for any US ZIP code (e.g. 'Weather in 90210?')")
    print("   (Type 'quit' to exit)\n")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\n👋 Goodbye!")
            break

        if not user_input:
            continue

        user_message = types.Content(
            role="user",
            parts=[types.Part(text=user_input)],
        )

        print("\n🤖 Agent is thinking...\n")
        print("-" * 70)

        # The last text part the agent emits is its final answer; tool calls
        # are echoed so you can see which tool was chosen.
        final_response = ""

        async for event in runner.run_async(
            user_id=USER_ID,
            session_id=session.id,
            new_message=user_message,
        ):
            if event.content and event.content.parts:
                for part in event.content.parts:
                    if getattr(part, "text", None):
                        final_response = part.text

                    if getattr(part, "function_call", None):
                        print(f"  🔧 Calling tool: {part.function_call.name}")

        print("-" * 70)
        if final_response:
            print(f"\n🤖 Agent:\n\n{final_response}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")

        print("\n" + "=" * 70)


if __name__ == "__main__":
    asyncio.run(run_agent())
