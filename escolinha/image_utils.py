import io
import logging
import os
from datetime import datetime

import boto3
from PIL import Image, UnidentifiedImageError

from escolinha import config

logger = logging.getLogger(__name__)


def process_avatar_image(file_stream, max_size=(500, 500), quality=85):
    """
    Redimensiona e comprime uma imagem para ser usada como foto do aluno.

    :param file_stream: O stream de bytes do arquivo de imagem.
    :param max_size: Uma tupla (width, height) com o tamanho máximo.
    :param quality: A qualidade da compressão JPEG (0-100).
    :return: (BytesIO com o JPEG, content type) ou (None, None) se não for imagem.
    """
    try:
        img = Image.open(file_stream)
        # Paletas (GIF) e canal alfa (PNG) não existem em JPEG
        if img.mode in ("P", "RGBA", "LA"):
            img = img.convert("RGB")
        img.thumbnail(max_size, Image.Resampling.LANCZOS)

        img_byte_arr = io.BytesIO()
        img.save(img_byte_arr, format="JPEG", quality=quality, optimize=True)
        img_byte_arr.seek(0)
        return img_byte_arr, "image/jpeg"
    except (UnidentifiedImageError, OSError) as e:
        logger.warning("Arquivo enviado não é uma imagem válida: %s", e)
        return None, None


def upload_foto_aluno(aluno_id: int, nome_original: str, imagem, mime_type: str) -> str:
    """Envia a foto já processada para o bucket e devolve a URL pública."""
    s3_client = boto3.client(
        "s3",
        endpoint_url=config.S3_ENDPOINT_URL,
        aws_access_key_id=config.AWS_ACCESS_KEY_ID,
        aws_secret_access_key=str(config.AWS_SECRET_ACCESS_KEY),
        region_name="auto",
    )
    base_filename, _ = os.path.splitext(nome_original)
    safe_filename = f"aluno_{aluno_id}_{datetime.utcnow().timestamp()}_{base_filename.replace(' ', '_')}.jpg"
    s3_client.upload_fileobj(imagem, config.S3_BUCKET_NAME, safe_filename, ExtraArgs={"ContentType": mime_type})
    return f"{config.PUBLIC_BUCKET_URL.rstrip('/')}/{safe_filename}"
