class ServiceError(Exception):
    pass


class ImageLoadError(ServiceError):
    def __init__(self, url: str, reason: str):
        super().__init__(f"Failed to load image {url}: {reason}")
        self.url = url
        self.reason = reason
