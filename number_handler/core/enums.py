from enum import Enum, unique

@unique
class HandlingState(str, Enum):
    NOT_STARTED = "not_started"
    VALIDATING = "validating"
    TRAVERSING = "traversing"
    WRITING = "writing"
    DONE = "done"
    FAILED = "failed"
