from .stay_period import StayPeriod as StayPeriod
