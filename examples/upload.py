import sys

import click
import httpx
from multipart_testkit import MultipartEncoder, fixed_boundary


def main() -> None:
    encoder = (
        MultipartEncoder(fixed_boundary("example-boundary"))
        .with_text("foo", "bar")
        .with_file(b"hello upload", "file", "text/plain", "hello.txt")
    )
    (name, value), body = encoder.build()
    click.secho(f"{name}: {value}", fg="green")
    click.echo(body.decode("utf-8", errors="replace"))

    if len(sys.argv) > 1:
        # e.g. python examples/upload.py https://httpbin.org/post
        r = httpx.post(sys.argv[1], content=body, headers={name: value})
        click.secho(f"upload status: {r.status_code}", fg="green")


if __name__ == "__main__":
    main()
