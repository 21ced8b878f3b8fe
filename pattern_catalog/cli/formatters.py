"""
CLI-specific formatting functions for human-readable output.
"""

import json
from typing import Any, Dict, List


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "json":
        return json.dumps(data, indent=2, default=str)
    return format_text_output(data)


def format_text_output(data: Any) -> str:
    """Format data as plain text."""
    if isinstance(data, dict) and "examples" in data:
        return format_examples_list(data["examples"])
    return json.dumps(data, indent=2, default=str)


def format_examples_list(examples: List[Dict[str, Any]]) -> str:
    """One line per example: label, padded, then the pattern it shows."""
    if not examples:
        return "No examples registered."

    width = max(len(example["description"]) for example in examples)
    lines = []
    for example in examples:
        lines.append(f"{example['description']:<{width}}  ({example['pattern']})")
    return "\n".join(lines)
