import logging


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    # presign/delete calls are chatty at INFO
    logging.getLogger("botocore").setLevel(logging.WARNING)
