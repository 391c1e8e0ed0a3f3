import click
import json
from sound_catalog.services import catalog_service
from sound_catalog.services.catalog_service import ServiceError
from sound_catalog.settings import get_settings


def init_catalog_commands(app):
    """Register catalog-related Flask CLI commands on the given app."""

    @app.cli.command('list-sounds')
    @click.option('--search', default=None, help='Case-insensitive term matched against names and tags')
    @click.option('--out-file', default=None, help='Optional path to write the JSON array to instead of stdout')
    def list_sounds(search, out_file):
        """Build the catalog from the asset directories and print it as JSON."""
        settings = get_settings()
        try:
            sounds = catalog_service.build_catalog(settings.music_dir, settings.description_dir)
        except ServiceError as e:
            click.echo(f'Failed to build catalog: {e}', err=True)
            raise SystemExit(1)

        sounds = catalog_service.filter_sounds(sounds, search)
        payload = json.dumps([s.to_dict() for s in sounds], ensure_ascii=False, indent=2)
        if out_file:
            with open(out_file, 'w', encoding='utf-8') as fh:
                fh.write(payload)
            click.echo(f'Wrote {len(sounds)} sounds to: {out_file}')
        else:
            click.echo(payload)
