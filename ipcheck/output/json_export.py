"""
JSON export for IPCheck
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..models import ClassificationResult
from .. import __version__


class JsonExporter:
    """
    Export classification results to JSON format.

    Output format is designed to be both human-readable
    and machine-parseable.
    """

    def export(self, result: ClassificationResult,
               output_path: Optional[Path] = None) -> dict:
        """
        Export a classification result to JSON.

        Args:
            result: Classification result
            output_path: Optional file path to write

        Returns:
            JSON-serializable dict
        """
        data = {
            "meta": {
                "version": __version__,
                "generator": "IPCheck",
                "generated_at": datetime.now().isoformat()
            },
            **result.to_dict()
        }

        if output_path:
            self._write_file(data, output_path)

        return data

    def _write_file(self, data: dict, path: Path):
        """Write JSON to file"""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
