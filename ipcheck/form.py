"""
Toolkit-independent state for the interactive checker form
"""

from typing import Callable, Optional

from .analysis import BaseResolver
from .checker import classify
from .models import ClassificationResult
from .output import format_report


class FormController:
    """
    Holds the result text shown by the form.

    The window only forwards button presses here and displays
    ``result_text``; all classification goes through ``classify``.
    """

    def __init__(self, resolver_factory: Optional[Callable[[], BaseResolver]] = None):
        self.resolver_factory = resolver_factory
        self.result_text = ""
        self.last_result: Optional[ClassificationResult] = None

    def check(self, text: str) -> str:
        """Classify the entered text and return the report to display"""
        if self.resolver_factory is None:
            result = classify(text)
        else:
            with self.resolver_factory() as resolver:
                result = classify(text, resolver=resolver)

        self.last_result = result
        self.result_text = format_report(result)
        return self.result_text

    def clear(self) -> str:
        """Reset the display"""
        self.result_text = ""
        self.last_result = None
        return self.result_text
