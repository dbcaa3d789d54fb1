class Z85Error(ValueError):
    pass


class InvalidLength(Z85Error):
    def __init__(self, message: str, length: int, multiple: int):
        super().__init__(message)
        self.length = length
        self.multiple = multiple


class InvalidCharacter(Z85Error):
    def __init__(self, window: str, position: int):
        super().__init__(
            f"invalid character found near {window!r} (offset {position})"
        )
        self.window = window
        self.position = position
