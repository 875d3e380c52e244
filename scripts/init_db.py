"""Creates the data file and seeds the default admin user."""
from inventory_app.config import get_settings
from inventory_app.database import JsonFileDB
from inventory_app.services.credentials import CredentialStore


settings = get_settings()
db = JsonFileDB(settings.data_file_path, lock_timeout=settings.LOCK_TIMEOUT_SECONDS)


if CredentialStore(db).bootstrap(settings.DEFAULT_ADMIN_USERNAME, settings.DEFAULT_ADMIN_PASSWORD):
    print(f'Created {db.path} with admin user {settings.DEFAULT_ADMIN_USERNAME}')
else:
    print(f'{db.path} already has users')
