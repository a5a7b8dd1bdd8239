from random import Random

import click
from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config

socketio = SocketIO(async_mode=None)

SESSION_EXTENSION = 'quiz_session'


def get_session_controller(flask_app):
    return flask_app.extensions[SESSION_EXTENSION]


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    raw_origins = flask_app.config.get('CORS_ORIGINS') or '*'
    origins = '*' if raw_origins == '*' else [o.strip() for o in raw_origins.split(',') if o.strip()]
    CORS(flask_app, origins=origins)
    socketio.init_app(flask_app, cors_allowed_origins=origins)

    from cryptoquiz.questions import load_question_bank
    from cryptoquiz.services.session import GameRules, SessionController

    seed = flask_app.config.get('HACK_SEED')
    flask_app.extensions[SESSION_EXTENSION] = SessionController(
        load_question_bank(flask_app.config.get('QUESTIONS_FILE')),
        rng=Random(seed) if seed is not None else Random(),
        rules=GameRules.from_config(flask_app.config),
        logger=flask_app.logger,
    )

    from cryptoquiz.main import main
    flask_app.register_blueprint(main)

    # Bind Socket.IO event handlers to the initialized socketio instance
    from cryptoquiz.socketio_events import register_socketio_handlers
    register_socketio_handlers()

    @click.command('questions')
    def questions_command():
        """Lists the question bank the server will play."""
        bank = get_session_controller(flask_app).bank
        for pos, question in enumerate(bank, start=1):
            click.echo(f"{pos}. {question.prompt}")
            for choice in question.choices:
                marker = '*' if question.is_correct(choice) else ' '
                click.echo(f"   {marker} {choice}")
        click.echo(f"{len(bank)} questions loaded.")

    flask_app.cli.add_command(questions_command)

    return flask_app
