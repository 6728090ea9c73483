import os

from aws_lambda_powertools import Logger

DEFAULT_SERVICE_NAME = "hotel-booking"


def get_logger(service_name: str | None = None) -> Logger:
    return Logger(
        service=service_name
        or os.getenv("POWERTOOLS_SERVICE_NAME", DEFAULT_SERVICE_NAME),
        level=os.getenv("LOG_LEVEL", "INFO"),
    )
