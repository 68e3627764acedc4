# single error hierarchy used to propagate clear messages to callers
# the builtin bases keep plain `except ValueError` / `except OverflowError` working

class QuizStatsError(Exception):
    pass

class InvalidArgument(QuizStatsError, ValueError):
    # caller misuse: out of range scalar, missing collection, malformed payload
    pass

class ArithmeticOverflow(QuizStatsError, OverflowError):
    # a computed value does not fit the target integer width
    pass
