#!/usr/bin/env python3
"""
Example usage of the date/time range helpers from a form handler.

Run after installing the package:
    pip install -e .
    python examples/example_workflow.py
"""

from form_datetime_range import (
    DEFAULT_DATE_FORMAT,
    check_date_time_range,
    format_date_time_range,
    validate_date_time_range,
)


def main():
    """Walk a submitted form through validation and formatting."""
    print("🗓  Form Date/Time Range Example")
    print("=" * 50)
    print(f"Dates are expected as {DEFAULT_DATE_FORMAT}")

    # 1. Form as the user filled it in, with 12-hour times
    form = {
        "startDate": "2024-01-01",
        "startTime": "9:00 AM",
        "endDate": "2024-01-01",
        "endTime": "5:00 PM",
    }
    print("\n1. Validating submitted range...")
    is_valid = validate_date_time_range(
        form["startDate"], form["startTime"], form["endDate"], form["endTime"]
    )
    print(f"   valid: {is_valid}")

    # 2. Same check with an explanation when it fails
    print("\n2. Checking a reversed range...")
    check = check_date_time_range("2024-01-01", "5:00 PM", "2024-01-01", "9:00 AM")
    print(f"   valid: {check.valid} ({check.reason})")

    # 3. Packaging expects 24-hour times
    print("\n3. Formatting a range with 24-hour times...")
    result = format_date_time_range(
        {
            "startDate": "2024-03-10",
            "startTime": "14:00",
            "endDate": "2024-03-10",
            "endTime": "16:00",
        }
    )
    print(f"   start: {result.start_date_time}")
    print(f"   end:   {result.end_date_time}")
    print(f"   raw:   {result.raw.model_dump(by_alias=True)}")

    print("\n✅ Example completed!")


if __name__ == "__main__":
    main()
