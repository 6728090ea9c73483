from .gender import Gender as Gender
