__all__ = ['CurveError', 'NotSmooth', 'MismatchedCurve', 'NotOnCurve', 'UnknownCurve']


class CurveError(Exception):
    def __init__(self, message, curve=None, point=None):
        super().__init__(message)
        self.message = message
        self.curve = curve
        self.point = point


class NotSmooth(CurveError):
    pass


class MismatchedCurve(CurveError):
    pass


class NotOnCurve(CurveError):
    pass


class UnknownCurve(CurveError):
    pass
