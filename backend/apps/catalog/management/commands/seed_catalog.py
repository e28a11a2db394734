from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.catalog.models import Product

# slug, title, price, in_stock, gender, type, sizes, tags, images, description
PRODUCTS = [
    (
        "mens_chill_crew_neck_sweatshirt",
        "Men’s Chill Crew Neck Sweatshirt",
        "75",
        7,
        "men",
        "shirts",
        ["XS", "S", "M", "L", "XL", "XXL"],
        ["sweatshirt"],
        ["1740176-00-A_0_2000.jpg", "1740176-00-A_1.jpg"],
        "Introducing the Tesla Chill Collection. The Men’s Chill Crew Neck Sweatshirt has a premium, heavyweight exterior and soft fleece interior for comfort in any season.",
    ),
    (
        "men_quilted_shirt_jacket",
        "Men's Quilted Shirt Jacket",
        "200",
        5,
        "men",
        "shirts",
        ["XS", "S", "M", "XL", "XXL"],
        ["jacket"],
        ["1740507-00-A_0_2000.jpg", "1740507-00-A_1.jpg"],
        "The Men's Quilted Shirt Jacket features a uniquely fit, quilted design for warmth and mobility in cold weather seasons.",
    ),
    (
        "men_raven_lightweight_zip_up_bomber_jacket",
        "Men's Raven Lightweight Zip Up Bomber Jacket",
        "130",
        10,
        "men",
        "shirts",
        ["S", "M", "L", "XL", "XXL"],
        ["shirt"],
        ["1740250-00-A_0_2000.jpg", "1740250-00-A_1.jpg"],
        "Introducing the Tesla Raven Collection. The Men's Raven Lightweight Zip Up Bomber has a premium, modern silhouette made from a sustainable bamboo cotton blend.",
    ),
    (
        "women_cropped_puffer_jacket",
        "Women's Cropped Puffer Jacket",
        "225",
        85,
        "women",
        "hoodies",
        ["XS", "S", "M"],
        ["hoodie"],
        ["1740535-00-A_0_2000.jpg", "1740535-00-A_1.jpg"],
        "The Women's Cropped Puffer Jacket features a uniquely cropped silhouette for the perfect, modern style while on the go during the cozy season ahead.",
    ),
    (
        "women_t_logo_short_sleeve_scoop_neck_tee",
        "Women's T Logo Short Sleeve Scoop Neck Tee",
        "35",
        30,
        "women",
        "shirts",
        ["XS", "S", "M", "L", "XL", "XXL"],
        ["shirt"],
        ["8765090-00-A_0_2000.jpg", "8765090-00-A_1.jpg"],
        "Designed for style and comfort, the Women's T Logo Short Sleeve Scoop Neck Tee features a tonal 3D silicone-printed T logo on the left chest.",
    ),
    (
        "kids_cybertruck_long_sleeve_tee",
        "Kids Cybertruck Long Sleeve Tee",
        "30",
        10,
        "kid",
        "shirts",
        ["XS", "S", "M"],
        ["shirt"],
        ["1742693-00-A_0_2000.jpg", "1742693-00-A_1.jpg"],
        "Designed for fit, comfort and style, the Tesla Cybertruck Long Sleeve Tee is made from 100% cotton and features a graffiti-style Cybertruck graphic.",
    ),
    (
        "tesla_plaid_mode_trucker_hat",
        "Plaid Mode Trucker Hat",
        "30",
        12,
        "unisex",
        "hats",
        [],
        ["hats"],
        ["https://cdn.example.com/products/1657932-00-A_0_2000.jpg"],
        "The Plaid Mode Trucker Hat features a breathable mesh back and an embroidered Plaid logo on the front.",
    ),
]


class Command(BaseCommand):
    help = "Seed the storefront catalog in one operation."

    def add_arguments(self, parser):
        parser.add_argument(
            "--flush", action="store_true", help="Delete existing products before seeding"
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options["flush"]:
            self.stdout.write("Flushing existing products...")
            Product.objects.all().delete()

        self.stdout.write("Seeding products...")
        created_count = 0
        for slug, title, price, in_stock, gender, type_, sizes, tags, images, desc in PRODUCTS:
            _, created = Product.objects.update_or_create(
                slug=slug,
                defaults=dict(
                    title=title,
                    price=Decimal(price),
                    in_stock=in_stock,
                    gender=gender,
                    type=type_,
                    sizes=sizes,
                    tags=tags,
                    images=images,
                    description=desc,
                ),
            )
            created_count += int(created)

        self.stdout.write(
            self.style.SUCCESS(
                f"Catalog seed completed ({created_count} created, {len(PRODUCTS) - created_count} updated)."
            )
        )
