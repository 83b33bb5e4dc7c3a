"""Example: Dry-run a restore and save. Run with: python examples/dry_run.py

Shows how the restore and save phases can be driven outside a CI runner by
injecting a custom CommandRunner and StateStore. Both are protocols (PEP 544),
so any object with the right methods works -- no inheritance required.
"""

from __future__ import annotations

from collections.abc import Sequence

from boringcache_action.config import ActionSettings
from boringcache_action.host.actions import Host, input_env_name
from boringcache_action.host.commands import configure_logging
from boringcache_action.host.state import InMemoryStateStore
from boringcache_action.phases import run_phase, run_restore, run_save

# ---------------------------------------------------------------------------
# A runner that prints instead of executing
# ---------------------------------------------------------------------------


class EchoRunner:
    """Prints each boringcache invocation and pretends primary keys miss.

    Satisfies the CommandRunner protocol.
    """

    def __init__(self, hit_prefix: str) -> None:
        self._hit_prefix = hit_prefix

    def ensure(self, version: str = "") -> None:
        print(f"(would check boringcache {version or 'any version'})")

    def run(self, args: Sequence[str], *, silent: bool = False) -> int:
        print("$ boringcache " + " ".join(args))
        if args[0] == "restore":
            return 0 if args[2].startswith(self._hit_prefix) else 1
        return 0


def main() -> None:
    configure_logging()
    settings = ActionSettings(github_repository="my-org/my-project")
    inputs = {
        "path": ".",
        "key": "deps-abc123",
        "restore-keys": "deps-",
        "no-platform": "true",
    }
    environ = {input_env_name(name): value for name, value in inputs.items()}

    state = InMemoryStateStore()
    restore_host = Host(environ=environ, state=state)
    outcome = run_phase("restore", run_restore, restore_host, EchoRunner("deps-:"), settings)
    print(f"outputs: {restore_host.outputs}")
    print(f"outcome: {outcome}")

    # The post step sees only the state the restore phase wrote.
    save_host = Host(environ={}, state=state)
    report = run_phase("save", run_save, save_host, EchoRunner(""), settings)
    print(f"save report: {report}")


if __name__ == "__main__":
    main()
