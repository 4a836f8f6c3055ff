"""Parcel Ledger — tracking bounded context."""
