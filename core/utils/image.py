import logging
from io import BytesIO
from typing import Optional
import requests
from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)

IMAGE_HEADERS = (
    b'\xff\xd8\xff',  # JPEG
    b'\x89PNG\r\n',   # PNG
    b'GIF87a',        # GIF
    b'GIF89a',        # GIF
    b'RIFF'           # WEBP
)

def looks_like_image(content: bytes) -> bool:
    """Check the content starts with a known image header"""
    return any(content.startswith(header) for header in IMAGE_HEADERS)

def process_image(image_data: bytes, max_size: int = 2000) -> bytes:
    """Normalise an image to an RGB JPEG no larger than max_size on either side.

    Args:
        image_data: Raw image bytes
        max_size: Maximum width or height in pixels (default: 2000)

    Returns:
        Processed image as JPEG bytes

    Raises:
        ValueError: If the bytes are not a readable image
    """
    if not looks_like_image(image_data):
        raise ValueError("Invalid image")
    try:
        img = Image.open(BytesIO(image_data))
        img.load()
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError("Invalid image") from e

    # Convert to RGB if necessary (e.g., if PNG with transparency)
    if img.mode != 'RGB':
        img = img.convert('RGB')

    if max(img.width, img.height) > max_size:
        img.thumbnail((max_size, max_size), Image.Resampling.LANCZOS)

    output = BytesIO()
    img.save(output, format='JPEG', quality=85, optimize=True)
    return output.getvalue()

def clean_image_url(url: str) -> str:
    """Prefer https for remote cover images"""
    if url.startswith('http://'):
        url = 'https://' + url[7:]
    return url

def download_image(url: str, timeout: int = 10) -> Optional[bytes]:
    """Download a remote image.

    Returns:
        The raw bytes, or None if the request failed or the response is not an image
    """
    if not url:
        return None

    try:
        response = requests.get(clean_image_url(url), timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.warning(f"Failed to download image from {url}: {e}")
        return None

    content_type = response.headers.get('content-type', 'image/jpeg')
    if not content_type.startswith('image/') or not looks_like_image(response.content):
        logger.warning(f"Response from {url} is not an image ({content_type})")
        return None

    return response.content
