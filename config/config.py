import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "class-attendance-dev"

    # Storan sejarah laporan: "file" (JSON pada cakera) atau "mysql"
    STORAGE_BACKEND = os.environ.get("STORAGE_BACKEND", "file").lower()
    STORAGE_DIR = os.environ.get("STORAGE_DIR", "instance")
    STORAGE_KEY = os.environ.get("STORAGE_KEY", "sk_attendance_history_v2")

    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_NAME = os.environ.get("DB_NAME", "class_attendance")
    AUTO_INIT_DB = bool(int(os.environ.get("AUTO_INIT_DB", "0")))

    # Google Apps Script endpoint; kosong = simpan di peranti sahaja
    CLOUD_SYNC_URL = os.environ.get("CLOUD_SYNC_URL", "")
    CLOUD_SYNC_TIMEOUT = float(os.environ.get("CLOUD_SYNC_TIMEOUT", "15"))

    SCHOOL_NAME = os.environ.get("SCHOOL_NAME", "SK KG KLID/PLAJAU")
    PROGRAMME_NAME = os.environ.get("PROGRAMME_NAME", "Kelas Bimbingan dan Gilap Permata")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


# Flat names read by create_app()
SECRET_KEY = Config.SECRET_KEY
STORAGE_BACKEND = Config.STORAGE_BACKEND
STORAGE_DIR = Config.STORAGE_DIR
STORAGE_KEY = Config.STORAGE_KEY
DB_CONFIG = {
    "host": Config.DB_HOST,
    "port": Config.DB_PORT,
    "user": Config.DB_USER,
    "password": Config.DB_PASSWORD,
    "database": Config.DB_NAME,
}
AUTO_INIT_DB = Config.AUTO_INIT_DB
CLOUD_SYNC_URL = Config.CLOUD_SYNC_URL
CLOUD_SYNC_TIMEOUT = Config.CLOUD_SYNC_TIMEOUT
SCHOOL_NAME = Config.SCHOOL_NAME
PROGRAMME_NAME = Config.PROGRAMME_NAME
LOG_LEVEL = Config.LOG_LEVEL
