"""Automated checks to highlight thin or empty catalog sections."""

from __future__ import annotations

from dataclasses import dataclass

from ..domain.catalog import Catalog


@dataclass(slots=True)
class ChecklistIssue:
    severity: str
    message: str


def run_checklist(catalog: Catalog) -> list[ChecklistIssue]:
    issues: list[ChecklistIssue] = []
    if not len(catalog.index):
        issues.append(ChecklistIssue("error", "No base items were loaded."))

    if not catalog.collections:
        issues.append(ChecklistIssue("error", "No collections were composed."))
    for collection in catalog.iter_collections():
        if not collection.items:
            issues.append(
                ChecklistIssue("warning", f"Collection '{collection.name}' resolved no items.")
            )
        elif len(collection.items) < len(collection.references):
            dropped = len(collection.references) - len(collection.items)
            issues.append(
                ChecklistIssue(
                    "info",
                    f"Collection '{collection.name}' dropped {dropped} unknown reference(s).",
                )
            )

    if not catalog.cases:
        issues.append(ChecklistIssue("error", "No cases were composed."))
    for case in catalog.iter_cases():
        if not case.items:
            issues.append(ChecklistIssue("warning", f"Case '{case.name}' has an empty pool."))

    for category, items in catalog.categories.items():
        if not items:
            issues.append(ChecklistIssue("warning", f"Category '{category.value}' is empty."))

    return issues
