"""CLI entry point for paystack-codegen."""

from pathlib import Path

import click

import paystack_gateway
from paystack_gateway.codegen.emitter import GenerationError, ModuleEmitter
from paystack_gateway.codegen.manifest import ManifestMarkerNotFoundError, update_manifest
from paystack_gateway.codegen.parser import OpenApiParser, UnhandledSchemaTypeError, load_document, tags_by_name
from paystack_gateway.request import api_modules

PACKAGE_DIR = Path(paystack_gateway.__file__).resolve().parent
PROJECT_ROOT = PACKAGE_DIR.parents[1]

DEFAULT_SPEC = PROJECT_ROOT / "openapi" / "paystack.yaml"
DEFAULT_MANIFEST = PACKAGE_DIR / "__init__.py"


@click.group(invoke_without_command=True)
@click.pass_context
def main(ctx: click.Context):
    """Paystack gateway: generate API modules from the Paystack OpenAPI document."""
    if ctx.invoked_subcommand is None:
        ctx.invoke(generate)


@main.command()
@click.option("--spec", "spec_path", default=DEFAULT_SPEC, type=click.Path(exists=True, path_type=Path), help="OpenAPI document to generate from.")
@click.option("-o", "--output", default=PACKAGE_DIR, type=click.Path(path_type=Path), help="Output directory for generated modules.")
@click.option("--manifest", default=DEFAULT_MANIFEST, type=click.Path(path_type=Path), help="Package __init__.py holding the '# API Modules' import block.")
@click.option("--strict-manifest/--no-strict-manifest", default=True, help="Fail when the manifest has no '# API Modules' marker.")
def generate(spec_path: Path, output: Path, manifest: Path, strict_manifest: bool):
    """Generate one module per OpenAPI tag and update the manifest imports."""
    click.echo(f"Parsing {spec_path}...")
    document = load_document(spec_path)
    try:
        operations = OpenApiParser(document).operations()
        files = ModuleEmitter(tags_by_name(document)).generate(operations)
    except (UnhandledSchemaTypeError, GenerationError) as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"Found {len(operations)} operations.")

    existing = {module.name for module in api_modules()}
    tags = list(dict.fromkeys(operation.tag for operation in operations))
    for tag in tags:
        if tag in existing:
            click.echo(f"Updating existing module: {tag}")
        else:
            click.echo(f"Processing new module: {tag}")

    output.mkdir(parents=True, exist_ok=True)
    for filename, content in files.items():
        file_path = output / filename
        file_path.write_text(content, encoding="utf-8")
        click.echo(f"  Created {file_path}")

    try:
        update_manifest(manifest, existing | set(tags))
    except ManifestMarkerNotFoundError as e:
        if strict_manifest:
            raise click.ClickException(str(e)) from e
        click.echo(f"Skipping manifest update: {e}", err=True)
    else:
        click.echo(f"Updated {manifest}")

    click.echo(f"Generated {len(files)} modules in {output}")


@main.command()
def modules():
    """List the registered API modules and their methods."""
    for module in sorted(api_modules(), key=lambda module: module.name):
        click.echo(f"{module.name}: {', '.join(module.api_methods)}")
