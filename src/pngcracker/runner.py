import logging
import os
import sys
from typing import Optional

import typer
import yaml

from pngcracker.kernel.chunk import Chunk
from pngcracker.kernel.chunk_type import ChunkType
from pngcracker.kernel.errors import PngError
from pngcracker.kernel.png import Png
from pngcracker.kernel.settings import png
from pngcracker.utils.fileio import read_file, write_file

app = typer.Typer()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Log every chunk read'),
    strict: bool = typer.Option(False, '--strict', help='Fail on invalid chunk types'),
) -> None:
    logging.basicConfig(format='%(levelname)s: %(message)s', stream=sys.stderr)
    logging.root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    ctx.obj = png(strict=strict)


def fail(message: str) -> typer.Exit:
    typer.secho(message, err=True, fg=typer.colors.RED)
    return typer.Exit(code=1)


def load(ctx: typer.Context, filename: str) -> Png:
    try:
        return Png.from_bytes(read_file(filename), cfg=ctx.obj or png)
    except (PngError, OSError) as exc:
        raise fail(f'{os.path.basename(filename)}: {exc}') from exc


def save(filename: str, root: Png) -> None:
    try:
        write_file(filename, bytes(root))
    except OSError as exc:
        raise fail(f'{os.path.basename(filename)}: {exc}') from exc


@app.command('encode')
def encode(
    ctx: typer.Context,
    filename: str = typer.Argument(..., help='PNG file to read from'),
    chunk_type: str = typer.Argument(..., help='4 letter chunk type'),
    message: str = typer.Argument(..., help='Message to store'),
    output: Optional[str] = typer.Argument(
        None, help='File to write, prints the result when omitted'
    ),
) -> None:
    try:
        chunk = Chunk.create(ChunkType.from_str(chunk_type), message.encode('utf-8'))
    except PngError as exc:
        raise fail(str(exc)) from exc
    root = load(ctx, filename)
    root.append_chunk(chunk)
    if output:
        save(output, root)
        print(f'Encoded {chunk!r} into {output}')
    else:
        print(root, end='')


@app.command('decode')
def decode(
    ctx: typer.Context,
    filename: str = typer.Argument(..., help='PNG file to read from'),
    chunk_type: str = typer.Argument(..., help='4 letter chunk type'),
) -> None:
    root = load(ctx, filename)
    try:
        print(root.chunk_by_type(chunk_type).data_as_text())
    except PngError as exc:
        raise fail(str(exc)) from exc


@app.command('remove')
def remove(
    ctx: typer.Context,
    filename: str = typer.Argument(..., help='PNG file to modify'),
    chunk_type: str = typer.Argument(..., help='4 letter chunk type'),
) -> None:
    root = load(ctx, filename)
    try:
        chunk = root.remove_chunk_by_type(chunk_type)
    except PngError as exc:
        raise fail(str(exc)) from exc
    save(filename, root)
    print(f'Removed {chunk!r}')


@app.command('print')
def print_png(
    ctx: typer.Context,
    filename: str = typer.Argument(..., help='PNG file to read from'),
) -> None:
    print(load(ctx, filename), end='')


@app.command('map')
def map_chunks(
    ctx: typer.Context,
    filename: str = typer.Argument(..., help='PNG file to read from'),
    pattern: Optional[str] = typer.Option(
        None, '--type', '-t', help='Chunk type pattern, e.g. {}Xt'
    ),
    dump: Optional[str] = typer.Option(None, '--dump', help='Save index to YAML file'),
) -> None:
    index = list(load(ctx, filename).index(pattern))
    if dump:
        with open(dump, 'w') as index_out:
            yaml.safe_dump(index, index_out, sort_keys=False)
    else:
        print(yaml.safe_dump(index, sort_keys=False), end='')


if __name__ == '__main__':
    app()
