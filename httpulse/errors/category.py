from enum import Enum


class Category(str, Enum):
    """Subsystem that originated a failure.

    Values are the strings sent across the UI boundary and must stay stable.
    """

    PERSISTENCE = "persistence"
    HTTP_TRANSPORT = "httpTransport"
    INVALID_URI = "invalidUri"
    INVALID_HEADER_VALUE = "invalidHeaderValue"
    INVALID_HEADER_NAME = "invalidHeaderName"
    HEADER_TO_STRING = "headerToString"
    IO = "io"
    COOKIE_JAR = "cookieJar"
    URL_PARSE = "urlParse"
    JSON_CODEC = "jsonCodec"
    BASE64_CODEC = "base64Codec"
    ARCHIVE = "archive"
    COOKIE_PARSE = "cookieParse"

    @classmethod
    def parse(cls, value: str) -> "Category":
        """Return the member for a wire string.

        Raises:
            ValueError: if the string is not a known category.
        """
        try:
            return cls(value)
        except ValueError:
            raise ValueError(
                f"Unknown error category {value!r}. Choose from: {[c.value for c in cls]}"
            ) from None

    def __str__(self) -> str:
        return self.value
