import logging

from escolinha import config
from escolinha.auth import get_password_hash
from escolinha.database import SessionLocal
from escolinha.models.usuario import Usuario

logger = logging.getLogger(__name__)


def create_first_admin():
    db = SessionLocal()

    try:
        # Verifica se já existe algum administrador cadastrado
        user = db.query(Usuario).filter(Usuario.papel == "administrador").first()

        if not user:
            logger.info("Criando primeiro usuário administrador (%s)...", config.ADMIN_EMAIL)
            db_user = Usuario(
                username="admin",
                email=config.ADMIN_EMAIL,
                nome="Administrador",
                hashed_password=get_password_hash(str(config.ADMIN_PASSWORD)),
                papel="administrador"
            )
            db.add(db_user)
            db.commit()
            logger.info("Administrador criado com sucesso.")
        else:
            logger.info("Administrador já existe: %s", user.email)

    except Exception:
        db.rollback()
        logger.exception("Erro ao criar o administrador inicial")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    from escolinha.database import Base, engine
    import escolinha.models  # noqa: F401
    Base.metadata.create_all(bind=engine)
    create_first_admin()
