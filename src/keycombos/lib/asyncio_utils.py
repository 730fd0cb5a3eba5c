import asyncio


def get_or_create_event_loop():
    """Return the running event loop, or a fresh one set as current."""
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        return loop
