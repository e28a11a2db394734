from django.db import models


class Product(models.Model):
    """A catalog document: one purchasable product with its variants and media."""

    GENDER_CHOICES = [
        ("men", "Men"),
        ("women", "Women"),
        ("kid", "Kid"),
        ("unisex", "Unisex"),
    ]

    slug = models.SlugField(max_length=255, unique=True)
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    # Stored as given; absolute URLs are built on read.
    images = models.JSONField(default=list, blank=True)
    in_stock = models.PositiveIntegerField(default=0)
    price = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    sizes = models.JSONField(default=list, blank=True)
    tags = models.JSONField(default=list, blank=True)
    type = models.CharField(max_length=50, blank=True, default="")
    gender = models.CharField(max_length=10, choices=GENDER_CHOICES, default="unisex")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "products"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["title"], name="product_title_idx"),
            models.Index(fields=["gender"], name="product_gender_idx"),
        ]

    def __str__(self):
        return self.title
