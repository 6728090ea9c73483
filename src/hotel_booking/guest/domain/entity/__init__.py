from .guest import Guest as Guest
