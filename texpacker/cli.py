"""
texpacker CLI - Command-line interface for packing texture atlases
"""

import click
import logging
import sys
from pathlib import Path
from PIL import Image, UnidentifiedImageError
from pydantic import ValidationError
from texpacker import Packer, __version__
from texpacker.exceptions import PackerError
from texpacker.packing import Heuristic, alpha_mask, trim_texture


@click.group()
@click.version_option(version=__version__)
def cli():
    """
    texpacker - Pack sprites into texture atlases.

    Examples:
        texpacker pack sprites/ -o out/atlas.png --size 512
        texpacker trim sprites/hero.png
    """
    pass


@cli.command()
@click.argument('inputs', nargs=-1, required=True)
@click.option('-o', '--output', required=True, help='Output path; atlases are written as <name>000.<ext>, <name>001.<ext>, ...')
@click.option('--size', default=1024, show_default=True, type=int, help='Atlas side in pixels')
@click.option('--padding', default=0, show_default=True, type=int, help='Gap in pixels between textures')
@click.option('--heuristic', default=Heuristic.AREA.value, show_default=True,
              help='Best-fit scoring: area or max_one_axis')
@click.option('--fill', default=None, help='Color for unused atlas space (e.g. darkmagenta, #ff00ff)')
@click.option('--manifest', is_flag=True, help='Also write a JSON manifest of all placements')
@click.option('--verbose', '-v', is_flag=True, help='Log every texture and atlas')
def pack(inputs, output, size, padding, heuristic, fill, manifest, verbose):
    """
    Pack images into texture atlases.

    INPUTS are image files or directories of images.

    Examples:
        texpacker pack sprites/ -o out/atlas.png
        texpacker pack a.png b.png -o out/atlas.png --size 256 --padding 2 --manifest
    """
    if verbose:
        logging.basicConfig(level=logging.INFO, format='%(levelname)s %(name)s: %(message)s')

    try:
        packer = Packer(atlas_size=size, padding=padding, heuristic=heuristic)
        textures = packer.scan(inputs)
        click.echo(f"Packing {len(textures)} textures into {size}x{size} atlases")

        result = packer.pack(textures)
        for error in result.rejected:
            click.secho(f"Warning: {error}", fg='yellow', err=True)

        written = result.save(output, fill=fill, manifest=manifest)

        if verbose:
            click.echo("\nAtlases:")
            for path, atlas in zip(written, result.atlases):
                click.echo(f"  {path}: {atlas.width}x{atlas.height}, {len(atlas.nodes)} textures")

        click.secho(
            f"✓ Success! Packed {result.placed_count} textures into {len(result.atlases)} atlas(es)",
            fg='green'
        )

    except FileNotFoundError as e:
        click.secho(f"Error: {e}", fg='red', err=True)
        sys.exit(1)
    except ValidationError as e:
        click.secho(f"Invalid options: {e}", fg='red', err=True)
        sys.exit(1)
    except UnidentifiedImageError as e:
        click.secho(f"Error: {e}", fg='red', err=True)
        sys.exit(1)
    except PackerError as e:
        click.secho(f"Packing Error: {e}", fg='red', err=True)
        sys.exit(1)
    except ValueError as e:
        click.secho(f"Error: {e}", fg='red', err=True)
        sys.exit(1)
    except Exception as e:
        click.secho(f"Unexpected error: {e}", fg='red', err=True)
        if verbose:
            import traceback
            traceback.print_exc()
        sys.exit(1)


@cli.command()
@click.argument('image_path')
def trim(image_path):
    """
    Show the transparent border of an image.

    Examples:
        texpacker trim sprites/hero.png
    """
    try:
        if not Path(image_path).exists():
            raise FileNotFoundError(f"Input file not found: {image_path}")

        with Image.open(image_path) as image:
            mask = alpha_mask(image)

        texture = trim_texture(image_path, mask)

        click.echo(f"Source: {texture.source_width}x{texture.source_height}")
        click.echo(f"Trimmed: {texture.width}x{texture.height}")
        click.echo(f"Padding: left={texture.padding.left} top={texture.padding.top} right={texture.padding.right} bottom={texture.padding.bottom}")

    except FileNotFoundError as e:
        click.secho(f"Error: {e}", fg='red', err=True)
        sys.exit(1)
    except UnidentifiedImageError as e:
        click.secho(f"Error: {e}", fg='red', err=True)
        sys.exit(1)


def main():
    """Entry point for the CLI"""
    cli()


if __name__ == '__main__':
    main()
