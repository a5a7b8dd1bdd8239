import os

BACKEND_ROOT = os.path.dirname(os.path.abspath(__file__))


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    PORT = int(os.environ.get('PORT', '3000'))
    # Comma separated list of origins allowed to open a socket
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
    # Frontend assets served at the site root
    PUBLIC_DIR = os.environ.get('PUBLIC_DIR') or os.path.join(os.path.dirname(BACKEND_ROOT), 'public')
    HEALTH_TEXT = os.environ.get('HEALTH_TEXT', 'Running SoloOS | Version 9.3.2')
    # Optional JSON question bank; the built-in bank is used when unset
    QUESTIONS_FILE = os.environ.get('QUESTIONS_FILE')
    MIN_PLAYERS = int(os.environ.get('MIN_PLAYERS', '2'))
    CORRECT_REWARD = int(os.environ.get('CORRECT_REWARD', '10'))
    HACK_COST = int(os.environ.get('HACK_COST', '20'))
    HACK_STEAL_MIN = int(os.environ.get('HACK_STEAL_MIN', '5'))
    HACK_STEAL_MAX = int(os.environ.get('HACK_STEAL_MAX', '15'))
    # Optional seed for reproducible hack rolls. Unset means system entropy.
    HACK_SEED = os.environ.get('HACK_SEED')
