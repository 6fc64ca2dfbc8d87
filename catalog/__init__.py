import logging

from flask import Flask

from catalog.config import config
from catalog.errors import NotFoundError
from catalog.log import init_request_logging, setup_logging
from catalog.models import db
from catalog.routes import routes
from catalog.schemas import ma
from catalog.services import catalog

logger = logging.getLogger(__name__)

def handle_not_found(err):
    return {"error": str(err)}, 404

def create_app(config_object=config):
    app = Flask(__name__)
    app.config.from_object(config_object)

    setup_logging(app.config["LOG_LEVEL"])
    init_request_logging(app)

    db.init_app(app)
    ma.init_app(app)
    catalog.init_app(app)

    app.register_blueprint(routes)
    app.register_error_handler(NotFoundError, handle_not_found)

    with app.app_context():
        db.create_all()

    logger.info("catalog app created (page size %s, max %s)",
                app.config["DEFAULT_PAGE_SIZE"], app.config["MAX_PAGE_SIZE"])
    return app
