import pytest


class DummyMCP:
    """Minimal FastMCP stand-in that records registered cache tools by name."""

    def __init__(self) -> None:
        self.tools = {}

    def tool(self, *, name: str):
        def _decorator(fn):
            assert name not in self.tools, f"tool registered twice: {name}"
            self.tools[name] = fn
            return fn
        return _decorator


@pytest.fixture
def dummy_mcp():
    return DummyMCP()
