import logging
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate

db = SQLAlchemy()
migrate = Migrate()

# same shape as the Lambda's stdout lines
LOG_FORMAT = '{"lvl": "%(levelname)s", "msg": "%(message)s", "name": "%(name)s"}'

log_handler = logging.StreamHandler()
log_handler.setFormatter(logging.Formatter(LOG_FORMAT))


def configure_logging(app):
    # app.logger is shared by every app built from this package; attach once
    if log_handler not in app.logger.handlers:
        app.logger.addHandler(log_handler)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))
