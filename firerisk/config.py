"""
Configuration settings for the Fire Risk Dashboard
"""
import os


class Config:
    """Flask application configuration"""
    
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'
    
    # Local database, used when Supabase is not configured
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'fire_risk.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    
    # Supabase REST store
    SUPABASE_URL = os.environ.get('SUPABASE_URL')
    SUPABASE_ANON_KEY = os.environ.get('SUPABASE_ANON_KEY')
    SUPABASE_TABLE = 'fire_risk_data'
    
    # Snapshot output
    DATA_DIR = os.path.abspath(os.environ.get('DATA_DIR') or os.path.join(basedir, 'public', 'data'))
    SNAPSHOT_FILENAME = 'fire-data.json'
    
    # Collector pacing (seconds)
    ZONE_DELAY = 0.5
    INSERT_DELAY = 0.2
    
    # Dashboard client
    SNAPSHOT_URL = os.environ.get('SNAPSHOT_URL')
    SNAPSHOT_FETCH_TIMEOUT = 10
    REFRESH_INTERVAL = 5 * 60
    DEMO_MODE = os.environ.get('DEMO_MODE', '').lower() in ('1', 'true', 'yes')
    
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SUPABASE_URL = None
    SUPABASE_ANON_KEY = None
    SNAPSHOT_URL = None
    DEMO_MODE = False
    ZONE_DELAY = 0
    INSERT_DELAY = 0
