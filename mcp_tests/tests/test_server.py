import sys
import types
import uuid
import importlib.util
from pathlib import Path

from core.cache import BoundedGroupCache


def _find_server_py() -> Path:
    # Try common layouts:
    # 1) <root>/server.py
    # 2) <root>/server/server.py
    # 3) <root>/src/server/server.py
    root = Path(__file__).resolve().parents[2]
    candidates = [
        root / "server.py",
        root / "server" / "server.py",
        root / "src" / "server" / "server.py",
    ]
    for p in candidates:
        if p.exists():
            return p
    raise FileNotFoundError(f"Could not find server.py. Tried: {candidates}")


def _install_fake_modules(monkeypatch, captures: dict):
    # ---- Fake mcp.server.fastmcp.FastMCP ----
    mcp_mod = types.ModuleType("mcp")
    mcp_server_mod = types.ModuleType("mcp.server")
    fastmcp_mod = types.ModuleType("mcp.server.fastmcp")

    class DummyFastMCP:
        def __init__(self, name: str):
            captures["fastmcp_name"] = name
            captures["mcp_instance"] = self
            self.run_calls = []

        def run(self, *, transport: str):
            self.run_calls.append({"transport": transport})
            captures["run_calls"] = list(self.run_calls)

    fastmcp_mod.FastMCP = DummyFastMCP

    # Mark package structure
    mcp_mod.__path__ = []
    mcp_server_mod.__path__ = []

    monkeypatch.setitem(sys.modules, "mcp", mcp_mod)
    monkeypatch.setitem(sys.modules, "mcp.server", mcp_server_mod)
    monkeypatch.setitem(sys.modules, "mcp.server.fastmcp", fastmcp_mod)

    # ---- Fake config ----
    config_mod = types.ModuleType("config")
    config_mod.CACHE_MAXSIZE = 7
    config_mod.LOG_LEVEL = "WARNING"
    config_mod.SERVER_NAME = "config-cache-test"
    monkeypatch.setitem(sys.modules, "config", config_mod)

    # ---- Fake tools ----
    tools_pkg = types.ModuleType("tools")
    tools_pkg.__path__ = []
    monkeypatch.setitem(sys.modules, "tools", tools_pkg)

    def _fake_tool_module(name: str):
        mod = types.ModuleType(f"tools.{name}")

        def register(mcp, *, cache):
            captures[f"register_{name}_calls"] = captures.get(f"register_{name}_calls", []) + [
                {"mcp": mcp, "cache": cache}
            ]

        mod.register = register
        monkeypatch.setitem(sys.modules, f"tools.{name}", mod)

    for name in ("cache_set", "cache_get", "cache_info"):
        _fake_tool_module(name)


def _load_server_module(monkeypatch, captures: dict):
    _install_fake_modules(monkeypatch, captures)

    server_path = _find_server_py()
    mod_name = f"server_under_test_{uuid.uuid4().hex}"
    spec = importlib.util.spec_from_file_location(mod_name, server_path)
    assert spec and spec.loader

    module = importlib.util.module_from_spec(spec)
    sys.modules[mod_name] = module
    spec.loader.exec_module(module)
    return module


def test_server_register_tools_and_di(monkeypatch):
    captures = {}
    module = _load_server_module(monkeypatch, captures)

    # FastMCP created with configured name
    assert captures["fastmcp_name"] == "config-cache-test"
    mcp = captures["mcp_instance"]

    # One cache built from config
    assert isinstance(module.cache, BoundedGroupCache)
    assert module.cache.maxsize == 7

    # Every tool module registered once, all against the SAME cache instance
    for name in ("cache_set", "cache_get", "cache_info"):
        calls = captures.get(f"register_{name}_calls", [])
        assert len(calls) == 1
        assert calls[0]["mcp"] is mcp
        assert calls[0]["cache"] is module.cache

    # main() runs stdio transport
    module.main()
    assert captures["run_calls"] == [{"transport": "stdio"}]
