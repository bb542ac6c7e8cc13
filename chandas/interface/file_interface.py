# chandas/interface/file_interface.py

import json
import sys
from pathlib import Path
from typing import Dict, Any, List, Optional, Union

from .base_interface import BaseInterface
from chandas.evaluation.verse_analyzer import VerseAnalyzer


class FileInterface(BaseInterface):
    """
    Batch interface: analyses every verse of an input file and saves the
    results as a JSON list.

    Accepted inputs:
      - plain text, verses separated by blank lines
      - a JSON list of strings, or of objects with "text" (and optional "id")
    """

    def __init__(self, input_path: Union[str, Path], output_path: Optional[Union[str, Path]] = None,
                 analyzer: Optional[VerseAnalyzer] = None):
        super().__init__(analyzer, "json")
        self.input_path = Path(input_path)
        self.output_path = Path(output_path) if output_path else None
        self.running = False

        self.verses = self._load_verses()
        self.total_items = len(self.verses)
        self.processed_count = 0
        self.output_data: List[Dict[str, Any]] = []

    def _load_verses(self) -> List[Dict[str, Any]]:
        """Load the verses from the input file."""
        try:
            with open(self.input_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except OSError as e:
            self.logger.error(f"Failed to read input: {e}")
            raise

        if self.input_path.suffix.lower() == ".json":
            verses = self._parse_json(content)
        else:
            verses = self._parse_text(content)

        self.logger.info(f"Loaded {len(verses)} verses from {self.input_path}")
        return verses

    def _parse_json(self, content: str) -> List[Dict[str, Any]]:
        data = json.loads(content)
        if not isinstance(data, list):
            raise ValueError("JSON input must be a list of verses")

        verses = []
        for index, item in enumerate(data, 1):
            if isinstance(item, str):
                verses.append({"id": index, "text": item})
            elif isinstance(item, dict) and "text" in item:
                verses.append({"id": item.get("id", index), "text": item["text"]})
            else:
                raise ValueError(f"Verse {index} must be a string or an object with 'text'")
        return verses

    def _parse_text(self, content: str) -> List[Dict[str, Any]]:
        verses = []
        block: List[str] = []
        for line in content.splitlines() + [""]:
            if line.strip():
                block.append(line)
            elif block:
                verses.append({"id": len(verses) + 1, "text": "\n".join(block)})
                block = []
        return verses

    def _process_item(self, item: Dict[str, Any]) -> Dict[str, Any]:
        """Analyze a single verse, recording failures instead of aborting."""
        try:
            analysis = self.analyzer.analyze(item["text"])
            return {"id": item["id"], **analysis.to_dict()}
        except Exception as e:
            self.logger.error(f"Failed to analyze verse {item['id']}: {e}")
            return {"id": item["id"], "text": item.get("text", ""), "error": str(e)}

    def _save_output(self):
        """Write the results to the output file or stdout."""
        payload = json.dumps(self.output_data, ensure_ascii=False, indent=2)

        if self.output_path is None:
            print(payload, file=sys.stdout)
            return

        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.output_path, 'w', encoding='utf-8') as f:
            f.write(payload)
        self.logger.info(f"Saved output to {self.output_path}")

    def run(self) -> None:
        """Run the batch analysis."""
        self.running = True
        self.logger.info(f"Starting analysis of {self.total_items} verses")

        try:
            for item in self.verses:
                if not self.running:
                    self.logger.info("Processing interrupted")
                    break

                self.output_data.append(self._process_item(item))
                self.processed_count += 1

            self.logger.info(f"Analysis completed. Processed {self.processed_count} verses.")
        except KeyboardInterrupt:
            self.logger.info("Processing interrupted by user")
        finally:
            self._save_output()
            self.running = False

    def stop(self):
        """Stop the processing."""
        self.running = False

    def get_progress(self) -> Dict[str, Any]:
        """Get current processing progress."""
        identified = sum(1 for item in self.output_data if item.get("result", {}).get("kind") == "identified")
        return {
            'total_items': self.total_items,
            'processed_count': self.processed_count,
            'identified_count': identified,
            'progress_percentage': (self.processed_count / self.total_items * 100) if self.total_items > 0 else 0,
            'running': self.running
        }

    def is_completed(self) -> bool:
        """Check if the batch has completed."""
        return self.processed_count >= self.total_items and not self.running
