import pytest

from paystack_gateway.codegen.manifest import ManifestMarkerNotFoundError, import_line, update_manifest

MANIFEST = '''"""Package."""

from paystack_gateway.request import RequestModule

# API Modules
# Rewritten by paystack-codegen generate.
from paystack_gateway import customer
from paystack_gateway import stale_module

# Extensions
from paystack_gateway.extensions import customer_extensions
'''


@pytest.fixture
def manifest(tmp_path):
    path = tmp_path / "__init__.py"
    path.write_text(MANIFEST, encoding="utf-8")
    return path


class TestUpdateManifest:
    def test_replaces_import_block_sorted(self, manifest):
        update_manifest(manifest, ["Transaction", "Customer", "DedicatedVirtualAccount"])
        content = manifest.read_text(encoding="utf-8")
        assert (
            "# API Modules\n"
            "# Rewritten by paystack-codegen generate.\n"
            "from paystack_gateway import customer\n"
            "from paystack_gateway import dedicated_virtual_account\n"
            "from paystack_gateway import transaction\n"
            "\n"
            "# Extensions\n"
        ) in content
        assert "stale_module" not in content

    def test_keeps_surrounding_content(self, manifest):
        update_manifest(manifest, ["Customer"])
        content = manifest.read_text(encoding="utf-8")
        assert content.startswith('"""Package."""\n\nfrom paystack_gateway.request import RequestModule\n')
        assert content.endswith("from paystack_gateway.extensions import customer_extensions\n")

    def test_idempotent(self, manifest):
        update_manifest(manifest, ["Customer", "Transaction"])
        first = manifest.read_text(encoding="utf-8")
        update_manifest(manifest, ["Transaction", "Customer", "Customer"])
        assert manifest.read_text(encoding="utf-8") == first

    def test_missing_marker_raises(self, tmp_path):
        path = tmp_path / "__init__.py"
        path.write_text("from paystack_gateway import customer\n", encoding="utf-8")
        with pytest.raises(ManifestMarkerNotFoundError, match="# API Modules"):
            update_manifest(path, ["Customer"])
        assert path.read_text(encoding="utf-8") == "from paystack_gateway import customer\n"


class TestImportLine:
    def test_underscored_module_name(self):
        assert import_line("TransferRecipient") == "from paystack_gateway import transfer_recipient\n"
