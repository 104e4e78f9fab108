class InformerConfigError(Exception):
    """
    Base for errors raised while loading or checking an informer config
    """
    pass


class DecodeError(InformerConfigError):
    """
    The persisted config document could not be decoded
    """
    def __init__(self, *args):
        if not args:
            default_message = "Error unmarshaling informer config"
            args = (default_message,)
        super().__init__(*args)


class InvalidConfig(InformerConfigError):
    """
    A config decoded fine but holds values an informer cannot work with
    """
    def __init__(self, *args):
        if not args:
            default_message = "informer config is invalid"
            args = (default_message,)
        super().__init__(*args)
