"""Shared contracts and builders for the test suite."""

from crystal_design.contracts.fields import (
    ArrayOf,
    Contract,
    ObjectField,
    OptionalScalar,
    Scalar,
)
from crystal_design.pipeline.runner import TaskSpec

SUMMARY_CONTRACT = Contract(
    name="Summary",
    fields={
        "summary": Scalar("string", "One-paragraph summary."),
        "colorPalette": ArrayOf(Scalar("string"), "Hex colors."),
    },
    primary="summary",
)

SCORED_CONTRACT = Contract(
    name="Scored",
    fields={
        "summary": Scalar("string"),
        "score": Scalar("number"),
    },
    primary="summary",
)

NESTED_CONTRACT = Contract(
    name="Nested",
    fields={
        "kind": Scalar("enum", "Kind of thing.", ("alpha", "beta")),
        "report": ObjectField(
            Contract(
                name="Report",
                fields={
                    "headline": Scalar("string"),
                    "notes": OptionalScalar("string"),
                },
            )
        ),
        "items": ArrayOf(
            ObjectField(
                Contract(
                    name="Item",
                    fields={
                        "label": Scalar("string"),
                        "weight": OptionalScalar("number"),
                    },
                )
            ),
            min_items=1,
            max_items=2,
        ),
        "tags": ArrayOf(Scalar("string"), optional=True),
    },
    primary="report.headline",
)


def summary_task(**overrides) -> TaskSpec:
    """A small task over SUMMARY_CONTRACT."""
    params = {
        "name": "design_suggestions",
        "contract": SUMMARY_CONTRACT,
        "role": "You summarize things.",
        "task": "Summarize the input.",
    }
    params.update(overrides)
    return TaskSpec(**params)
