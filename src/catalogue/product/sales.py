"""RecordProductSale: bump the sales counter used to rank related products."""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from catalogue.domain import catalogue
from catalogue.product.product import Product


@catalogue.command(part_of="Product")
class RecordProductSale:
    product_id: Identifier(required=True)
    quantity: Integer(required=True, min_value=1)


@catalogue.command_handler(part_of=Product)
class RecordProductSaleHandler:
    @handle(RecordProductSale)
    def record_product_sale(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.record_sale(command.quantity)
        repo.add(product)
