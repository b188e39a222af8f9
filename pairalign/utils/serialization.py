"""Serialization utilities for scoring rules (load and save as YAML)."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml

from pairalign.scoring import FixedScoringRule, MatrixScoringRule, ScoringRule
from pairalign.utils.matrices import load_bundled_matrix

FIXED_KEYS = ("match_reward", "mismatch_penalty", "gap_cost")


def scoring_rule_to_dict(rule: ScoringRule) -> Dict[str, Any]:
    """
    Convert a scoring rule into a plain dictionary suitable for YAML.
    """
    if isinstance(rule, FixedScoringRule):
        return {
            "type": "fixed",
            "match_reward": rule.match_reward,
            "mismatch_penalty": rule.mismatch_penalty,
            "gap_cost": rule.gap_cost,
            "case_sensitive": rule.case_sensitive,
        }
    if isinstance(rule, MatrixScoringRule):
        return {
            "type": "matrix",
            "table": rule.format_table(),
            "case_sensitive": rule.case_sensitive,
        }
    raise ValueError(f"Cannot serialize scoring rule of type {type(rule).__name__}")


def scoring_rule_from_dict(payload: Dict[str, Any], base_dir: Path | None = None) -> ScoringRule:
    """
    Build a scoring rule from its dictionary form.

    Matrix rules name a bundled matrix (``name``), a matrix file (``path``,
    relative to ``base_dir`` when given) or carry the table text (``table``).
    """
    params = payload.get("scoring_rule", payload)
    rule_type = params.get("type")
    case_sensitive = bool(params.get("case_sensitive", True))

    if rule_type == "fixed":
        missing = [key for key in FIXED_KEYS if key not in params]
        if missing:
            raise ValueError(f"fixed scoring rule missing keys: {missing}")
        return FixedScoringRule(
            params["match_reward"],
            params["mismatch_penalty"],
            params["gap_cost"],
            case_sensitive=case_sensitive,
        )

    if rule_type == "matrix":
        if "table" in params:
            return MatrixScoringRule.from_text(params["table"], case_sensitive)
        if "path" in params:
            path = Path(params["path"])
            if base_dir is not None and not path.is_absolute():
                path = base_dir / path
            return MatrixScoringRule.from_file(path, case_sensitive)
        if "name" in params:
            return load_bundled_matrix(
                params["name"], bool(params.get("case_sensitive", False))
            )
        raise ValueError("matrix scoring rule needs one of 'table', 'path' or 'name'")

    raise ValueError(f"Unknown scoring rule type: {rule_type!r}")


def load_scoring_rule(yaml_path: Path) -> ScoringRule:
    """Load a scoring rule from a YAML file."""
    yaml_path = Path(yaml_path)
    with yaml_path.open("r", encoding="utf-8") as handle:
        payload = yaml.safe_load(handle)

    if not isinstance(payload, dict):
        raise ValueError(f"{yaml_path} does not describe a scoring rule")
    return scoring_rule_from_dict(payload, base_dir=yaml_path.parent)


def save_scoring_rule(rule: ScoringRule, yaml_path: Path) -> None:
    """Write a scoring rule to a YAML file readable by ``load_scoring_rule``."""
    with Path(yaml_path).open("w", encoding="utf-8") as handle:
        yaml.safe_dump({"scoring_rule": scoring_rule_to_dict(rule)}, handle, sort_keys=False)


__all__ = [
    "scoring_rule_to_dict",
    "scoring_rule_from_dict",
    "load_scoring_rule",
    "save_scoring_rule",
]
