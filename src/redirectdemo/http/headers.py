"""src/redirectdemo/http/headers.py

Case-insensitive HTTP header mapping.
"""

from typing import Any, Dict, Iterator, List, Mapping, Optional, Union, cast


class Headers(Mapping[str, str]):
    """
    Case-insensitive dictionary for HTTP headers with support for multiple values.

    Repeated headers are joined by commas. Access raw lists via get_all().
    """

    __slots__ = ("_headers",)

    def __init__(self, headers: Optional[Dict[str, Union[str, List[str]]]] = None):
        self._headers: Dict[str, List[str]] = {}
        if headers:
            for k, v in headers.items():
                if isinstance(v, list):
                    self._headers[k.lower()] = list(v)
                else:
                    self._headers[k.lower()] = [v]

    def __getitem__(self, key: str) -> str:
        value = self.get(key)
        if value is None:
            raise KeyError(key)
        return cast(str, value)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._headers

    def __iter__(self) -> Iterator[str]:
        return iter(self._headers)

    def __len__(self) -> int:
        return len(self._headers)

    def __repr__(self) -> str:
        return f"Headers({self._headers!r})"

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get header value.

        Args:
            key: Header name (case-insensitive).
            default: Default value if header not found.

        Returns:
            Comma-joined string for multiple values, or default if not found.
        """
        values = self._headers.get(key.lower())
        if not values:
            return default

        return ", ".join(values)

    def get_all(self, key: str) -> List[str]:
        """Return every value sent for ``key``, empty list if absent."""
        return list(self._headers.get(key.lower(), []))
