"""Freeform data parser

Turns pasted text into a dataset by trying a fixed chain of heuristics:

1. JSON (strict, then with bare keys quoted) when the whole input is
   wrapped in [] or {}
2. bracketed groups such as ``[1, 2, 3]`` or ``(4, 5)`` in the cleaned text
3. lines joined by the trailing-comma continuation rule
4. every number in the cleaned text as one series

The first stage that yields anything wins. Failures never raise out of
``parse``; they come back as a failed ``ParseResult``.
"""

from typing import Callable, List, Optional, Union

from anygraph.config import Config, create_default_logger
from anygraph.exceptions import (
    ConfigurationError,
    EmptyInputError,
    MalformedJsonError,
    NoNumericDataError,
    ParseError,
)
from anygraph.logger import Logger
from anygraph.models import ParseResult, PointsDataset, ValuesDataset
from anygraph.parsing.classifier import ClassificationRule, classify_arrays
from anygraph.parsing.cleaner import clean_input
from anygraph.parsing.extractors import (
    extract_bracketed_arrays,
    extract_flat_sequence,
    split_multiline_series,
)
from anygraph.parsing.json_adapter import parse_json_dataset

ArrayStage = Callable[[str], List[List[float]]]


class DataParser:
    """Parses freeform numeric text into a values or points dataset"""

    def __init__(
        self,
        classification: Optional[Union[ClassificationRule, str]] = None,
        logger: Optional[Logger] = None,
    ):
        """
        Args:
            classification: Rule for telling values from points; defaults to
                the configured rule (ANYGRAPH_CLASSIFICATION), or pairs when
                that setting is invalid
            logger: Logger for parse diagnostics
        """
        self.logger = logger or create_default_logger("anygraph.parser")
        self.classification = self._resolve_classification(classification)
        self.array_stages: List[ArrayStage] = [
            extract_bracketed_arrays,
            split_multiline_series,
            extract_flat_sequence,
        ]

    def _resolve_classification(
        self, classification: Optional[Union[ClassificationRule, str]]
    ) -> ClassificationRule:
        if classification is not None:
            return ClassificationRule(classification)
        try:
            return ClassificationRule(Config.get_classification_rule())
        except ConfigurationError as e:
            self.logger.warning("Ignoring invalid classification rule", error=str(e))
            return ClassificationRule.PAIRS

    def parse(self, raw_text: str) -> ParseResult:
        """
        Parse raw text into a dataset

        Args:
            raw_text: Text exactly as the user supplied it

        Returns:
            ParseResult carrying the dataset on success or an error message
            on failure; raw_data is always the untouched input
        """
        raw_data = raw_text if isinstance(raw_text, str) else ""
        try:
            dataset = self._parse(raw_text)
        except ParseError as e:
            self.logger.warning("Parse failed", error=str(e), input_length=len(raw_data))
            return ParseResult.fail(str(e), raw_data)
        except Exception as e:
            self.logger.error(
                "Unexpected error during parsing", error=str(e), error_type=type(e).__name__
            )
            return ParseResult.fail(str(e) or type(e).__name__, raw_data)

        self.logger.debug(
            "Parse succeeded",
            data_type=dataset.data_type,
            series=len(dataset.values if dataset.data_type == "values" else dataset.points),
        )
        return ParseResult.ok(dataset, raw_data)

    def _parse(self, raw_text: str) -> Union[ValuesDataset, PointsDataset]:
        text = raw_text.strip()
        if not text:
            raise EmptyInputError()

        dataset = self._try_json(text)
        if dataset is not None:
            return dataset

        cleaned = clean_input(text)
        if not cleaned.strip():
            raise EmptyInputError()

        arrays = self._extract_arrays(cleaned)
        if not arrays:
            raise NoNumericDataError()

        return classify_arrays(arrays, self.classification)

    def _try_json(self, text: str) -> Optional[PointsDataset]:
        try:
            dataset = parse_json_dataset(text)
        except MalformedJsonError as e:
            self.logger.debug("JSON-shaped input did not parse, falling through", error=str(e))
            return None
        if dataset is not None:
            self.logger.debug("Parsed input as JSON points", points=len(dataset.points[0]))
        return dataset

    def _extract_arrays(self, cleaned: str) -> List[List[float]]:
        for stage in self.array_stages:
            arrays = stage(cleaned)
            if arrays:
                self.logger.debug("Extracted arrays", stage=stage.__name__, arrays=len(arrays))
                return arrays
        return []


def parse(raw_text: str) -> ParseResult:
    """Parse with a parser built from the current configuration"""
    return DataParser().parse(raw_text)
