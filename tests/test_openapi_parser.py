from pathlib import Path

import pytest

from paystack_gateway.codegen.parser import (
    OpenApiParser,
    UnhandledSchemaTypeError,
    group_by_tag,
    load_document,
    method_name,
    parse_openapi,
    response_data_fields,
    schema_type,
    tags_by_name,
)

FIXTURES = Path(__file__).parent / "fixtures"


def _operation(operations, tag, name):
    return [op for op in operations if op.tag == tag and op.method_name == name][0]


@pytest.fixture
def operations():
    return parse_openapi(FIXTURES / "paystack.yaml")


class TestOperationDiscovery:
    def test_untagged_operations_are_skipped(self, operations):
        assert len(operations) == 6
        assert all(op.path != "/health" for op in operations)

    def test_tag_whitespace_removed(self, operations):
        assert {op.tag for op in operations} == {"DedicatedVirtualAccount", "TransferRecipient", "Plan", "Charge"}

    def test_operations_keep_document_order_per_tag(self, operations):
        groups = group_by_tag(operations)
        assert [op.method_name for op in groups["DedicatedVirtualAccount"]] == ["list", "create"]
        assert [op.http_method for op in groups["DedicatedVirtualAccount"]] == ["GET", "POST"]

    def test_missing_operation_id_falls_back_to_method_and_path(self, operations):
        charge = group_by_tag(operations)["Charge"][0]
        assert charge.operation_id == "post_charge"
        assert charge.method_name == "post_charge"

    def test_summary_and_description(self, operations):
        update = _operation(operations, "Plan", "update")
        assert update.summary == "Update Plan"
        assert update.description == "Update a plan details on your integration"


class TestParameters:
    def test_header_parameters_ignored(self, operations):
        listing = _operation(operations, "DedicatedVirtualAccount", "list")
        assert [p.name for p in listing.parameters] == ["active", "currency"]
        assert listing.parameters[0].param_type == "bool"
        assert listing.parameters[0].required is False

    def test_path_item_parameters_merged_and_required(self, operations):
        update = _operation(operations, "Plan", "update")
        code = update.path_parameters[0]
        assert code.name == "code"
        assert code.required is True

    def test_all_properties_required_without_required_list(self, operations):
        update = _operation(operations, "Plan", "update")
        body = [p for p in update.parameters if p.location == "body"]
        assert [p.name for p in body] == ["name", "amount", "interval"]
        assert all(p.required for p in body)

    def test_required_before_optional_keeping_document_order(self, operations):
        update = _operation(operations, "Plan", "update")
        assert [p.python_name for p in update.parameters] == ["code", "name", "amount", "interval", "from_"]

        charge = _operation(operations, "Charge", "post_charge")
        assert [p.name for p in charge.parameters] == ["email", "amount", "pin", "birthday", "metadata"]

    def test_all_of_merges_properties_and_required(self, operations):
        create = _operation(operations, "DedicatedVirtualAccount", "create")
        required = {p.name: p.required for p in create.parameters}
        assert required == {"customer": True, "preferred_bank": True, "subaccount": False}

    def test_array_body_properties_are_required_lists(self, operations):
        bulk = _operation(operations, "TransferRecipient", "bulk")
        assert [(p.name, p.param_type, p.required) for p in bulk.parameters] == [
            ("type", "list[str]", True),
            ("name", "list[str]", True),
            ("account_number", "list[str]", True),
        ]

    def test_array_valued_item_property_uses_element_schema(self):
        batch = {
            "type": "array",
            "description": "A list of recipients",
            "items": {"type": "object", "properties": {"name": {"type": "string"}}},
        }
        operation = {
            "requestBody": {
                "content": {
                    "application/json": {
                        "schema": {"type": "array", "items": {"type": "object", "properties": {"batch": batch}}},
                    }
                }
            }
        }

        [param] = OpenApiParser({}).request_body_parameters(operation)

        assert param.param_type == "list[dict]"
        assert param.description == "A list of recipients"
        assert [(p.name, p.param_type) for p in param.object_properties] == [("name", "str")]

    def test_duplicate_python_names_keep_first(self, operations):
        listing = _operation(operations, "Plan", "list")
        assert [p.name for p in listing.parameters] == ["perPage", "status"]
        assert listing.parameters[0].param_type == "int"

    def test_types_rendered(self, operations):
        update = _operation(operations, "Plan", "update")
        types = {p.name: p.param_type for p in update.parameters}
        assert types["interval"] == 'Literal["daily", "weekly"]'
        assert types["from"] == "datetime"
        assert types["amount"] == "int"

    def test_object_properties_nested(self, operations):
        charge = _operation(operations, "Charge", "post_charge")
        metadata = [p for p in charge.parameters if p.name == "metadata"][0]
        assert metadata.param_type == "dict"
        assert [(p.name, p.param_type) for p in metadata.object_properties] == [("custom_fields", "list[dict]")]


class TestSchemaType:
    def test_scalars(self):
        assert schema_type({"type": "string"}) == "str"
        assert schema_type({"type": "integer"}) == "int"
        assert schema_type({"type": "number"}) == "float"
        assert schema_type({"type": "boolean"}) == "bool"
        assert schema_type({"type": "object"}) == "dict"

    def test_nested_array(self):
        assert schema_type({"type": "array", "items": {"type": "array", "items": {"type": "integer"}}}) == "list[list[int]]"

    def test_unhandled_type_raises(self):
        with pytest.raises(UnhandledSchemaTypeError, match="null"):
            schema_type({"type": "null"})

    def test_missing_type_raises(self):
        with pytest.raises(UnhandledSchemaTypeError):
            schema_type({"description": "no type"})

    def test_refs_resolved(self):
        parser = OpenApiParser({"components": {"schemas": {"Code": {"type": "string"}}}})
        assert parser.schema_type({"$ref": "#/components/schemas/Code"}) == "str"

    def test_cyclic_ref_raises(self):
        parser = OpenApiParser({"components": {"schemas": {"A": {"$ref": "#/components/schemas/A"}}}})
        with pytest.raises(ValueError, match="Cannot resolve"):
            parser.resolve({"$ref": "#/components/schemas/A"})


class TestMethodName:
    def test_strips_lower_camel_tag_prefix(self):
        assert method_name("Miscellaneous", "miscellaneous_listBanks") == "list_banks"
        assert method_name("ApplePay", "applePay_registerDomain") == "register_domain"

    def test_prefix_overrides(self):
        assert method_name("DedicatedVirtualAccount", "dedicatedAccount_requery") == "requery"
        assert method_name("TransferRecipient", "transferrecipient_bulk") == "bulk"

    def test_transaction_initialize_renamed(self):
        assert method_name("Transaction", "transaction_initialize") == "initialize_transaction"

    def test_keyword_gets_trailing_underscore(self):
        assert method_name("Plan", "plan_import") == "import_"


class TestResponseDataFields:
    def test_envelope_keys_removed(self, operations):
        update = _operation(operations, "Plan", "update")
        assert response_data_fields(update) == ["json", "name", "plan_code", "amount", "interval"]

    def test_first_2xx_response_used(self, operations):
        create = _operation(operations, "DedicatedVirtualAccount", "create")
        assert response_data_fields(create) == ["account_name", "account_number"]

    def test_no_success_schema(self, operations):
        bulk = _operation(operations, "TransferRecipient", "bulk")
        assert bulk.success_schema is None
        assert response_data_fields(bulk) == []


class TestTags:
    def test_tags_by_name(self):
        tags = tags_by_name(load_document(FIXTURES / "paystack.yaml"))
        dva = tags["DedicatedVirtualAccount"]
        assert dva.title == "Dedicated Virtual Account"
        assert dva.product_name == "Dedicated Virtual Accounts"
        assert tags["Plan"].product_name == ""

    def test_tag_names_drop_every_kind_of_whitespace(self):
        document = {
            "tags": [{"name": "Transfer\tRecipient", "description": "Beneficiaries"}],
            "paths": {
                "/transferrecipient": {
                    "post": {"tags": ["Transfer\tRecipient"], "operationId": "transferrecipient_create"},
                }
            },
        }

        [operation] = OpenApiParser(document).operations()
        tags = tags_by_name(document)

        assert operation.tag == "TransferRecipient"
        assert operation.method_name == "create"
        assert tags[operation.tag].title == "Transfer Recipient"
