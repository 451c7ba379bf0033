"""Line-oriented REPL for fexl, powered by prompt_toolkit.

Lines accumulate until the buffer parses into complete expressions; each is
then evaluated against one long-lived Runtime and its debug form printed.
Errors are reported per expression and never end the session.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory

from fexl.config import get_log_level
from fexl.errors import FexlError, FexlIncompleteInput, FexlParseError
from fexl.interpreter import Runtime
from fexl.reader.parser import parse_all

log = logging.getLogger(__name__)

PROMPT = "fexl> "
CONTINUATION = "....  "


class ReplSession:
    """Buffers input lines and evaluates them once they form complete nodes."""

    def __init__(self, runtime: Runtime | None = None, out: TextIO | None = None):
        self.out = out if out is not None else sys.stdout
        self.runtime = runtime if runtime is not None else Runtime(out=self.out)
        self.buffer = ""

    @property
    def pending(self) -> bool:
        """True while the buffer holds an incomplete expression."""
        return bool(self.buffer)

    def feed(self, line: str) -> None:
        self.buffer += line + "\n"
        try:
            nodes = parse_all(self.buffer)
        except FexlIncompleteInput:
            return
        except FexlParseError as exc:
            self.buffer = ""
            self.out.write(f"Error: {exc}\n")
            return

        self.buffer = ""
        for node in nodes:
            try:
                result = self.runtime.eval(node)
            except FexlError as exc:
                log.debug("evaluation failed: %r", exc)
                self.out.write(f"Error: {exc}\n")
            else:
                self.out.write(f"{result!r}\n")

    def reset(self) -> None:
        self.buffer = ""


def main() -> None:
    """Interactive read-eval-print loop."""
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")

    session: PromptSession[str] = PromptSession(history=InMemoryHistory())
    repl = ReplSession()

    print("fexl repl - Ctrl-D to exit")
    while True:
        try:
            line = session.prompt(CONTINUATION if repl.pending else PROMPT)
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            repl.reset()
            print("KeyboardInterrupt")
            continue
        repl.feed(line)


if __name__ == "__main__":
    main()
