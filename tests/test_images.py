from __future__ import annotations
from pathlib import Path

from conftest import follow

JPEG = b"\xff\xd8\xff\xe0fake-jpeg"


def test_images_page(admin_client):
    resp = admin_client.get("/images")

    assert resp.status_code == 200
    assert '<input type="submit"' in resp.text
    assert '<input type="file"' in resp.text


def test_upload_image(admin_client, settings):
    resp = admin_client.post("/upload", files={"file": ("test_image.jpg", JPEG, "image/jpeg")})

    assert resp.status_code == 302
    assert resp.headers["location"] == "/images"
    body = follow(admin_client, resp)
    assert "test_image.jpg has been uploaded." in body
    assert 'src="/uploads/test_image.jpg"' in body
    assert (Path(settings.images_dir) / "test_image.jpg").read_bytes() == JPEG


def test_uploaded_image_is_served(admin_client):
    admin_client.post("/upload", files={"file": ("cat.PNG", b"png-bytes", "image/png")})

    resp = admin_client.get("/uploads/cat.PNG")

    assert resp.status_code == 200
    assert resp.content == b"png-bytes"


def test_upload_unsupported_file(admin_client, settings):
    resp = admin_client.post("/upload", files={"file": ("test_file.rtf", b"{\\rtf1}", "text/plain")})

    assert resp.status_code == 302
    assert "File must be an image." in follow(admin_client, resp)
    assert not (Path(settings.images_dir) / "test_file.rtf").exists()


def test_upload_without_file(admin_client):
    resp = admin_client.post("/upload")

    assert resp.status_code == 302
    assert "You must choose a file." in follow(admin_client, resp)


def test_upload_image_signed_out(client, settings):
    resp = client.post("/upload", files={"file": ("test_image.jpg", JPEG, "image/jpeg")})

    assert resp.status_code == 302
    assert resp.headers["location"] == "/"
    assert "You must be signed in to do that." in follow(client, resp)
    assert not (Path(settings.images_dir) / "test_image.jpg").exists()
