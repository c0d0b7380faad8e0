class ScrapeError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(ScrapeError):
    pass


class NetworkError(ScrapeError):
    pass


class FetchError(ScrapeError):
    def __init__(self, status_code: int, status_text: str = ""):
        self.status_code = status_code
        self.status_text = status_text
        super().__init__(f"Failed to fetch website: {status_code} {status_text}".rstrip())


class ParkingPageError(ScrapeError):
    def __init__(self, url: str | None = None):
        self.url = url
        super().__init__(
            "This appears to be a parking page or domain for sale. "
            "Please check the URL and try again."
        )


class PersistenceError(ScrapeError):
    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(f"Failed to store scraped data: {message}")
