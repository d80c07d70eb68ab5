#!/usr/bin/env python3
"""Shopping list picker with validation and user-created entries."""

from __future__ import annotations

import logging

from rich_multiselect import (
    DynamicOption,
    Invalid,
    MultiSelect,
    UserCancelled,
    Valid,
)

FRUITS = [
    "Banana",
    "Apple",
    "Strawberry",
    "Grapes",
    "Lemon",
    "Tangerine",
    "Watermelon",
    "Orange",
    "Pear",
    "Avocado",
    "Pineapple",
]


def validate(selected):
    if len(selected) < 2:
        return Invalid("This list is too small!")
    if not any(option.value == "Pineapple" for option in selected):
        return Invalid("Remember to buy pineapples")
    return Valid()


def main() -> None:
    logging.basicConfig(level=logging.WARNING)

    prompt = MultiSelect(
        "Select the fruits for your shopping list:",
        FRUITS,
        validator=validate,
        formatter=lambda selected: f"{len(selected)} different fruits",
        dynamic_option=DynamicOption(
            condition=DynamicOption.absent_from,
            creator=lambda text: text,
        ),
    )

    try:
        fruits = prompt.prompt_skippable()
    except UserCancelled:
        print("The shopping list could not be processed")
        return

    if fruits is None:
        print("Maybe next time")
    else:
        print(f"I'll get right on it: {', '.join(fruits)}")


if __name__ == "__main__":
    main()
