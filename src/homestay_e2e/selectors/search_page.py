"""Centralised selectors for the homestay search page and its results view.

The date inputs and result markers carry stable ids/classes; district, guests and
the submit button fall back to ``name`` attributes when the id is missing.
"""
from __future__ import annotations


class SearchSelectors:
    district_select = "#district, select[name='district']"
    check_in_input = "#checkIn"
    check_out_input = "#checkOut"
    guests_select = "#guests, select[name='guests'], input[name='guests']"
    search_button = "#searchButton, form button[type='submit'], form input[type='submit']"

    results_container = "#search-results"
    pagination = ".pagination"
    result_items = ".result-item"


class ValidationMessages:
    check_out_before_check_in = (
        "Check-out date cannot be earlier than check-in date. Please reselect the dates."
    )
    check_in_after_check_out = (
        "Check-in date cannot be later than check-out date. Please reselect the dates."
    )
