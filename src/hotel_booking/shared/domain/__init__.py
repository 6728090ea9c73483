from .entity import Entity as Entity
from .exception import (
    BookingOverlapException as BookingOverlapException,
)
from .exception import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    FailedInitializationException as FailedInitializationException,
)
from .exception import (
    InvalidArgumentException as InvalidArgumentException,
)
from .exception import (
    ResourceNotFoundException as ResourceNotFoundException,
)
from .repository import Repository as Repository
