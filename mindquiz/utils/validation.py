"""
Question bank validation.

JSON Schema (Draft 7) checks with readable messages, plus an opt-in repair
pass for the usual hand-editing slips in question bank files: unknown keys,
points written as strings and "true"/"false" written as strings. Every
repair is recorded so the loader can log it.
"""

import json
from copy import deepcopy
from pathlib import Path
from typing import Any, Optional

from jsonschema import Draft7Validator, FormatChecker, ValidationError

from ..config import config


class ValidationResult:
    """Outcome of validating one document; truthy when it passed."""

    def __init__(
        self,
        valid: bool,
        errors: list[str],
        data: Any = None,
        repairs: Optional[list[str]] = None,
    ):
        self.valid = valid
        self.errors = errors
        # The document that was checked, repaired copy included
        self.data = data
        self.repairs = repairs or []

    def __bool__(self) -> bool:
        return self.valid

    def __str__(self) -> str:
        if not self.valid:
            lines = [f"{len(self.errors)} problem(s) found:"]
            lines.extend(f"  - {error}" for error in self.errors)
            return "\n".join(lines)
        if self.repairs:
            return f"Valid after {len(self.repairs)} repair(s)"
        return "Valid"


class SchemaValidator:
    """
    Validates documents against one JSON Schema file.

    With auto_repair, a failing document is repaired on a copy and checked
    once more; the caller's data is never modified.
    """

    def __init__(self, schema_path: Path | str):
        self.schema_path = Path(schema_path)
        with open(self.schema_path, "r", encoding="utf-8") as f:
            self.schema = json.load(f)
        self.validator = Draft7Validator(self.schema, format_checker=FormatChecker())

    def validate(self, data: dict, auto_repair: bool = False) -> ValidationResult:
        """
        Check data against the schema.

        Args:
            data: Parsed JSON document
            auto_repair: Retry once on a repaired copy if the first check fails

        Returns:
            ValidationResult
        """
        errors = [self._format_error(error) for error in self.validator.iter_errors(data)]
        if not errors:
            return ValidationResult(valid=True, errors=[], data=data)
        if not auto_repair:
            return ValidationResult(valid=False, errors=errors, data=data)

        repaired_data, repairs = self._attempt_repair(data)
        result = self.validate(repaired_data, auto_repair=False)
        result.repairs = repairs
        return result

    def _format_error(self, error: ValidationError) -> str:
        # e.g. "questions/0/points: 'ten' is not of type 'integer' (type)"
        location = "/".join(str(p) for p in error.path) or "document"
        return f"{location}: {error.message} ({error.validator})"

    def _attempt_repair(self, data: dict) -> tuple[dict, list[str]]:
        repaired = deepcopy(data)
        repairs: list[str] = []
        self._drop_unknown_keys(repaired, self.schema, repairs, "document")
        return repaired, repairs

    def _drop_unknown_keys(self, node: Any, schema: Any, repairs: list[str], location: str):
        """Walk node alongside schema, deleting keys a closed object does not declare."""
        if not isinstance(schema, dict):
            return

        if isinstance(node, list):
            for i, child in enumerate(node):
                self._drop_unknown_keys(child, schema.get("items"), repairs, f"{location}/{i}")
            return

        if not isinstance(node, dict):
            return

        declared = schema.get("properties", {})
        if schema.get("additionalProperties") is False:
            for key in [k for k in node if k not in declared]:
                del node[key]
                repairs.append(f"Dropped undeclared key '{key}' from {location}")

        for key, child_schema in declared.items():
            if key in node:
                self._drop_unknown_keys(node[key], child_schema, repairs, f"{location}/{key}")


class QuestionBankValidator(SchemaValidator):
    """
    Question bank schema plus the cross-field rules a schema cannot state:
    a multiple choice correct_option must be one of its options, and
    question_ids must be unique within the bank.
    """

    def __init__(self, schema_path: Optional[Path] = None):
        super().__init__(schema_path or config.paths.question_bank_schema)

    def _attempt_repair(self, data: dict) -> tuple[dict, list[str]]:
        repaired, repairs = super()._attempt_repair(data)

        for i, item in enumerate(repaired.get("questions", []) or []):
            if not isinstance(item, dict):
                continue

            points = item.get("points")
            if isinstance(points, str) and points.strip().isdigit():
                item["points"] = int(points.strip())
                repairs.append(f"Coerced question {i} points: '{points}' -> {item['points']}")

            answer = item.get("correct_answer")
            if isinstance(answer, str) and answer.strip().lower() in {"true", "false"}:
                item["correct_answer"] = answer.strip().lower() == "true"
                repairs.append(
                    f"Coerced question {i} correct_answer: '{answer}' -> {item['correct_answer']}"
                )

        return repaired, repairs

    def validate(self, data: dict, auto_repair: bool = False) -> ValidationResult:
        """Schema check first; cross-field rules only run on a schema-valid bank."""
        result = super().validate(data, auto_repair=auto_repair)
        if not result.valid:
            return result

        errors = []
        seen_ids = set()
        for i, item in enumerate(result.data["questions"]):
            if item["question_type"] == "multiple_choice":
                if item["correct_option"] not in item["options"]:
                    errors.append(
                        f"Question {i}: correct_option '{item['correct_option']}' is not one of its options"
                    )

            question_id = item.get("question_id")
            if question_id is not None:
                if question_id in seen_ids:
                    errors.append(f"Duplicate question_id: {question_id}")
                seen_ids.add(question_id)

        if errors:
            return ValidationResult(
                valid=False, errors=errors, data=result.data, repairs=result.repairs
            )
        return result


def validate_question_bank(data: dict, auto_repair: bool = False) -> ValidationResult:
    """Validate a parsed question bank against the bundled schema."""
    return QuestionBankValidator().validate(data, auto_repair=auto_repair)
