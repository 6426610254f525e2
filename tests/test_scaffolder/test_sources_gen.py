"""Tests for the generated Java sources of one module.

Covers:
- Package declarations and file locations
- Cross-file type references (controller -> service -> repository -> entity)
- The REST surface: paths, verbs and status codes
- Update merging only name and description
- OpenAPI server URL
"""

from __future__ import annotations

import re
from http import HTTPStatus
from pathlib import PurePosixPath

import pytest

from springgen.scaffolder.sources_gen import (
    MODULE_SUBPACKAGES,
    REST_ENDPOINTS,
    UPDATE_FIELDS,
    JavaSourceGenerator,
    controller_base_path,
    entry_point_class,
    java_source_root,
    module_source_dir,
)


pytestmark = pytest.mark.unit

BASE = "com.example.shop"


@pytest.fixture
def sources(renderer) -> JavaSourceGenerator:
    return JavaSourceGenerator(renderer)


def _package(content: str) -> str:
    return re.match(r"package ([\w.]+);", content).group(1)


# ---------------------------------------------------------------------------
# Layout helpers
# ---------------------------------------------------------------------------


class TestLayout:
    def test_java_source_root(self):
        assert java_source_root(BASE) == PurePosixPath("src/main/java/com/example/shop")

    def test_module_source_dir(self, order_item):
        assert module_source_dir(BASE, order_item) == PurePosixPath(
            "src/main/java/com/example/shop/orderItem"
        )

    def test_entry_point_class(self, order_item):
        assert entry_point_class(BASE, order_item) == "com.example.shop.orderItem.Application"

    def test_subpackages(self):
        assert MODULE_SUBPACKAGES == ("config", "controller", "service", "repository", "entity")

    def test_controller_base_path(self, order_item):
        assert controller_base_path(order_item) == "/api/orderItems"

    def test_rest_statuses(self):
        statuses = {e.action: e.success for e in REST_ENDPOINTS}
        assert statuses == {
            "list": HTTPStatus.OK,
            "get": HTTPStatus.OK,
            "create": HTTPStatus.CREATED,
            "update": HTTPStatus.OK,
            "delete": HTTPStatus.NO_CONTENT,
        }


# ---------------------------------------------------------------------------
# Files and packages
# ---------------------------------------------------------------------------


class TestRenderAll:
    def test_paths_in_order(self, sources, order_item):
        paths = [a.relative_path.as_posix() for a in sources.render_all(BASE, order_item)]
        root = "src/main/java/com/example/shop/orderItem"
        assert paths == [
            f"{root}/Application.java",
            f"{root}/entity/OrderItem.java",
            f"{root}/repository/OrderItemRepository.java",
            f"{root}/service/OrderItemService.java",
            f"{root}/controller/OrderItemController.java",
            f"{root}/config/OpenApiConfig.java",
        ]

    def test_package_matches_directory(self, sources, order_item):
        for artifact in sources.render_all(BASE, order_item):
            relative_dir = artifact.relative_path.parent.relative_to("src/main/java")
            assert _package(artifact.content) == ".".join(relative_dir.parts)

    def test_file_name_matches_public_type(self, sources, order_item):
        for artifact in sources.render_all(BASE, order_item):
            type_name = artifact.relative_path.stem
            assert re.search(rf"public (class|interface) {type_name}\b", artifact.content)

    def test_no_unrendered_markup(self, sources, product):
        for artifact in sources.render_all(BASE, product):
            assert "{{" not in artifact.content
            assert "{%" not in artifact.content


class TestCrossFileReferences:
    def test_controller_uses_defined_service_type(self, sources, order_item):
        service = sources.render_service(BASE, order_item).content
        controller = sources.render_controller(BASE, order_item).content
        assert "public class OrderItemService {" in service
        assert "import com.example.shop.orderItem.service.OrderItemService;" in controller
        assert "private final OrderItemService orderItemService;" in controller

    def test_service_uses_defined_repository_type(self, sources, order_item):
        repository = sources.render_repository(BASE, order_item).content
        service = sources.render_service(BASE, order_item).content
        assert (
            "public interface OrderItemRepository extends JpaRepository<OrderItem, Long>"
            in repository
        )
        assert "import com.example.shop.orderItem.repository.OrderItemRepository;" in service
        assert "private final OrderItemRepository orderItemRepository;" in service

    def test_entity_imported_everywhere_it_is_used(self, sources, order_item):
        expected = "import com.example.shop.orderItem.entity.OrderItem;"
        assert expected in sources.render_repository(BASE, order_item).content
        assert expected in sources.render_service(BASE, order_item).content
        assert expected in sources.render_controller(BASE, order_item).content


# ---------------------------------------------------------------------------
# Individual sources
# ---------------------------------------------------------------------------


class TestEntity:
    def test_fields_and_annotations(self, sources, product):
        content = sources.render_entity(BASE, product).content
        assert "@Entity" in content
        assert "@Id" in content
        assert "@GeneratedValue(strategy = GenerationType.IDENTITY)" in content
        assert "private Long id;" in content
        assert "private String name;" in content
        assert "private String description;" in content
        assert "public Product(String name, String description)" in content

    def test_lombok(self, sources, product):
        content = sources.render_entity(BASE, product).content
        for annotation in ("@Data", "@NoArgsConstructor", "@AllArgsConstructor"):
            assert annotation in content


class TestService:
    def test_delegates_to_repository(self, sources, product):
        content = sources.render_service(BASE, product).content
        assert "@Service" in content
        assert "return this.productRepository.findAll();" in content
        assert "return this.productRepository.findById(id);" in content
        assert "return this.productRepository.save(product);" in content
        assert "this.productRepository.deleteById(id);" in content


class TestController:
    def test_base_path(self, sources, order_item):
        content = sources.render_controller(BASE, order_item).content
        assert '@RequestMapping("/api/orderItems")' in content

    def test_handlers(self, sources, order_item):
        content = sources.render_controller(BASE, order_item).content
        assert "public ResponseEntity<List<OrderItem>> getAllOrderItems()" in content
        assert "public ResponseEntity<OrderItem> getOrderItemById(@PathVariable final Long id)" in content
        assert "public ResponseEntity<OrderItem> createOrderItem(" in content
        assert "public ResponseEntity<OrderItem> updateOrderItem(" in content
        assert "public ResponseEntity<Void> deleteOrderItem(@PathVariable final Long id)" in content

    def test_mappings(self, sources, product):
        content = sources.render_controller(BASE, product).content
        assert content.count("@GetMapping\n") == 1
        assert content.count('@GetMapping("/{id}")') == 1
        assert content.count("@PostMapping\n") == 1
        assert content.count('@PutMapping("/{id}")') == 1
        assert content.count('@DeleteMapping("/{id}")') == 1

    def test_status_codes(self, sources, product):
        content = sources.render_controller(BASE, product).content
        assert "HttpStatus.CREATED" in content
        assert "HttpStatus.NO_CONTENT" in content
        # get, update and delete each answer 404 for a missing id
        assert content.count("HttpStatus.NOT_FOUND") == 3

    def test_update_merges_only_name_and_description(self, sources, product):
        content = sources.render_controller(BASE, product).content
        setters = re.findall(r"existingProduct\.set(\w+)\(product\.get(\w+)\(\)\);", content)
        assert setters == [("Name", "Name"), ("Description", "Description")]
        assert UPDATE_FIELDS == ("name", "description")
        assert "setId" not in content

    def test_delete_checks_existence_first(self, sources, product):
        content = sources.render_controller(BASE, product).content
        check = content.index("this.productService.findById(id).isPresent()")
        delete = content.index("this.productService.deleteById(id);")
        assert check < delete


class TestApplicationAndOpenApi:
    def test_application(self, sources, product):
        content = sources.render_application(BASE, product).content
        assert _package(content) == "com.example.shop.product"
        assert "@SpringBootApplication" in content
        assert "SpringApplication.run(Application.class, args);" in content

    def test_openapi_default_server(self, sources, product):
        content = sources.render_openapi_config(BASE, product).content
        assert '.url("http://localhost:8080")' in content
        assert '.title("Product API")' in content
        assert '.bearerFormat("JWT")' in content

    def test_openapi_custom_server(self, renderer, product):
        sources = JavaSourceGenerator(renderer, api_server_url="https://api.example.com")
        content = sources.render_openapi_config(BASE, product).content
        assert '.url("https://api.example.com")' in content
