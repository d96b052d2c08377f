"""Interactive read-eval-print loop for Lispy."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable, Optional, TextIO

from lispy import __version__
from lispy import config
from lispy.debug_utils.pprint import DEFAULT_OPTIONS, load_options_from_json, pprint_value
from lispy.errors import LispyError
from lispy.interpreter import Interpreter


class Repl:
    """Reads a line, evaluates it, prints the result, repeats."""

    def __init__(
        self,
        interp: Optional[Interpreter] = None,
        input_fn: Callable[[str], str] = input,
        out: TextIO = sys.stdout,
        prompt: Optional[str] = None,
        history_file: Optional[Path] = None,
        color: bool = False,
        options: Optional[dict] = None,
    ):
        self.interp = interp if interp is not None else Interpreter()
        self.input_fn = input_fn
        self.out = out
        self.prompt = prompt if prompt is not None else config.get_prompt()
        self.history_file = history_file
        if options is None:
            raw = config.get_print_options()
            options = load_options_from_json(raw) if raw else DEFAULT_OPTIONS
        # LISPY_COLOR=1 forces colour on over the printer options
        self.options = {**options, "color": True} if color else dict(options)
        self._logger = logging.getLogger("Repl")
        self._readline = None

    def banner(self) -> str:
        return f"Lispy Version {__version__}\nPress Ctrl+c to Exit\n"

    def _setup_history(self) -> None:
        try:
            import readline
        except ImportError:
            self._logger.info("readline unavailable, line history disabled")
            return
        self._readline = readline
        readline.set_completer(self._complete)
        readline.parse_and_bind("tab: complete")
        if self.history_file is not None and self.history_file.exists():
            try:
                readline.read_history_file(str(self.history_file))
            except OSError as e:
                self._logger.warning("cannot read history %s: %s", self.history_file, e)

    def _save_history(self) -> None:
        if self._readline is None or self.history_file is None:
            return
        try:
            self._readline.write_history_file(str(self.history_file))
        except OSError as e:
            self._logger.warning("cannot write history %s: %s", self.history_file, e)

    def _complete(self, text: str, state: int) -> Optional[str]:
        matches = [n for n in self.interp.env.names() if n.startswith(text)]
        return matches[state] if state < len(matches) else None

    def eval_line(self, line: str) -> str:
        """Evaluate one line and return the text to print for it."""
        try:
            result = self.interp.eval(line)
        except LispyError as e:
            return str(e)
        return pprint_value(result, self.options)

    def run(self, use_history: bool = True) -> None:
        if use_history:
            self._setup_history()
        print(self.banner(), file=self.out)
        try:
            while True:
                try:
                    line = self.input_fn(self.prompt)
                except (EOFError, KeyboardInterrupt):
                    print(file=self.out)
                    break
                if not line.strip():
                    continue
                print(self.eval_line(line), file=self.out)
        finally:
            self._save_history()


def main() -> None:
    logging.basicConfig(level=config.get_log_level())
    repl = Repl(history_file=config.get_history_file(), color=config.use_color())
    repl.run()


if __name__ == "__main__":
    main()
