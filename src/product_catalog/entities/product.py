"""Product domain entity."""

from typing import Any

# A product is an open-ended flat record. Only "id" is read by this package;
# every other field is passed through to storage untouched.
Product = dict[str, Any]
