# chandas/interface/cli_interface.py

import sys
from typing import List, Optional, TextIO

from .base_interface import BaseInterface
from chandas.evaluation.verse_analyzer import VerseAnalyzer


class CLIInterface(BaseInterface):
    """
    Interactive interface: reads padas from a stream and prints the scansion.

    A blank line ends the current verse; end of input analyses any pending
    verse and finishes.
    """

    def __init__(self, analyzer: Optional[VerseAnalyzer] = None, output_format: str = "text",
                 name: str = "Chandas Scansion",
                 input_stream: Optional[TextIO] = None, output_stream: Optional[TextIO] = None):
        super().__init__(analyzer, output_format)
        self.name = name
        self.input_stream = input_stream or sys.stdin
        self.output_stream = output_stream or sys.stdout
        self.running = False
        self.completed = False
        self.verses_analyzed = 0

    def _print(self, text: str = "") -> None:
        print(text, file=self.output_stream)

    def _is_interactive(self) -> bool:
        isatty = getattr(self.input_stream, "isatty", None)
        return bool(isatty and isatty())

    def analyze_and_print(self, text: str) -> None:
        """Analyze one verse and write the result."""
        analysis = self.analyzer.analyze(text)
        self._print(self.format_analysis(analysis))
        self._print()
        self.verses_analyzed += 1

    def run(self) -> None:
        """Run the CLI interface."""
        self.running = True
        self.completed = False
        pending: List[str] = []

        if self._is_interactive():
            self._print(f"{self.name}: enter padas, one per line; a blank line analyses the verse")
            self._print("Press Ctrl+D to finish, Ctrl+C to stop")
            self._print("-" * 50)

        try:
            for raw_line in self.input_stream:
                if not self.running:
                    break

                line = raw_line.rstrip("\n")
                if line.strip():
                    pending.append(line)
                    continue

                if pending:
                    self.analyze_and_print("\n".join(pending))
                    pending = []

            if pending and self.running:
                self.analyze_and_print("\n".join(pending))

            self.completed = True
            self.logger.info(f"Analyzed {self.verses_analyzed} verses")

        except KeyboardInterrupt:
            self._print("\nInterrupted by user")
        finally:
            self.cleanup()

    def is_completed(self) -> bool:
        """Check if the interface has completed."""
        return self.completed

    def stop(self) -> None:
        """Stop after the current verse."""
        self.running = False

    def cleanup(self) -> None:
        """Cleanup resources."""
        self.running = False
