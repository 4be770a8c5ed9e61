"""CLI adapter for the first-run setup.

Creates the initial administrator when the user set is empty. The password
comes from GESTION_ADMIN_PASSWORD, or is ``admin`` when unset; either way it
must be changed at first sign-in.
"""

from gestion_dj.application.use_cases.bootstrap_admin import (
    BootstrapAdminUseCase,
)
from gestion_dj.domain.errors import GestionError
from gestion_dj.infrastructure.container import (
    build_data_store,
    build_password_hasher,
)
from gestion_dj.infrastructure.logging.logger import get_app_logger
from gestion_dj.infrastructure.settings import AppSettings


def main() -> int:
    """Run the admin bootstrap use case.

    Returns:
        int: Process exit code, 0 on success.
    """
    logger = get_app_logger()
    settings = AppSettings.from_env()
    use_case = BootstrapAdminUseCase(
        data_store=build_data_store(settings),
        password_hasher=build_password_hasher(),
        logger=logger,
    )

    try:
        admin = use_case.execute(password=settings.admin_password)
    except GestionError as exc:
        logger.error(f"Admin setup failed: {exc.message}")
        print(exc.message)
        return 1

    if admin is None:
        print("Users already exist; nothing to set up.")
        return 0
    print(
        f"Created administrator '{admin.username}' "
        f"active until {admin.active_until:%Y-%m-%d}. "
        "Change its password at first sign-in."
    )
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
