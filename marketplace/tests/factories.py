from decimal import Decimal

import factory
from django.contrib.auth import get_user_model
from faker import Faker

from accounts.models import SellerProfile
from marketplace.models import Category, Product, Purchase, PurchaseItem, SellerPaymentDetail, StoredFile

User = get_user_model()
fake = Faker()


class UserFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = User

    username = factory.Sequence(lambda n: f"user_{n}")
    email = factory.Sequence(lambda n: f"user_{n}@example.com")
    password = factory.PostGenerationMethodCall("set_password", "defaultpassword")
    is_active = True


class SellerFactory(UserFactory):
    username = factory.Sequence(lambda n: f"seller_{n}")
    email = factory.Sequence(lambda n: f"seller_{n}@example.com")


class SellerProfileFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = SellerProfile

    user = factory.SubFactory(SellerFactory)
    phone = "+628123456789"
    bank_account_name = "BCA"
    bank_account_holder = factory.LazyFunction(lambda: fake.name()[:32])
    bank_account_number = factory.Sequence(lambda n: f"{8000000000 + n}")


class CategoryFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Category
        django_get_or_create = ("name",)

    name = factory.Iterator(["Food", "Beverage", "Clothes", "Furniture", "Tools"])


class StoredFileFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = StoredFile

    file_uri = factory.Sequence(lambda n: f"https://files.example.com/uploads/{n}.jpg")
    file_thumbnail_uri = factory.LazyAttribute(lambda o: o.file_uri.replace(".jpg", "_thumb.jpg"))


class ProductFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Product

    name = factory.Sequence(lambda n: f"Product {n}")
    sku = factory.Sequence(lambda n: f"SKU-{n:05d}")
    price = Decimal("15000.00")
    stock_quantity = 10

    seller = factory.SubFactory(SellerFactory)
    category = factory.SubFactory(CategoryFactory)
    file = factory.SubFactory(StoredFileFactory)


class PurchaseFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Purchase

    sender_name = "Budi Santoso"
    sender_contact_type = Purchase.CONTACT_TYPE_EMAIL
    sender_contact_detail = "budi@example.com"
    total_amount = 0
    is_paid = False


class PurchaseItemFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = PurchaseItem

    purchase = factory.SubFactory(PurchaseFactory)
    product = factory.SubFactory(ProductFactory)
    seller = factory.LazyAttribute(lambda o: o.product.seller)
    quantity = 1

    @factory.lazy_attribute
    def unit_price(self):
        return self.product.price

    @factory.lazy_attribute
    def total(self):
        return self.unit_price * self.quantity

    product_name = factory.LazyAttribute(lambda o: o.product.name)
    product_sku = factory.LazyAttribute(lambda o: o.product.sku)


class SellerPaymentDetailFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = SellerPaymentDetail

    purchase = factory.SubFactory(PurchaseFactory)
    seller = factory.SubFactory(SellerFactory)
    proof_file = factory.SubFactory(StoredFileFactory)


def purchase_payload(items, contact_type="email", contact_detail="budi@example.com", name="Budi Santoso"):
    """Build a POST /v1/purchase body from (product, qty) pairs."""
    return {
        "purchasedItems": [{"productId": str(product.pk), "qty": qty} for product, qty in items],
        "senderName": name,
        "senderContactType": contact_type,
        "senderContactDetail": contact_detail,
    }
