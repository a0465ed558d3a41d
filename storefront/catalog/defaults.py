"""
Bundled default catalog.

Seeds the catalog cache on first run, after a reset, and whenever the
persisted snapshot is missing or unusable. The backend product service
seeds its store from the same list.
"""

from __future__ import annotations

from typing import List

from storefront.catalog.models import Product, ProductVariant, SizeGuide

_PLACEHOLDER = "/placeholder.svg"


def _v(id: str, sku: str, price: float, original_price: float, stock: int, size=None, color=None) -> ProductVariant:
    return ProductVariant(
        id=id, size=size, color=color, price=price, original_price=original_price, stock=stock, sku=sku
    )


DEFAULT_PRODUCTS: List[Product] = [
    # Football
    Product(
        id="messi-inter-miami-jersey",
        name="Lionel Messi Inter Miami CF Jersey 2024 - Official Home Kit",
        description=(
            "Official Lionel Messi Inter Miami CF home jersey for the 2024 season. Premium quality "
            "moisture-wicking fabric with official team badges, sponsors, and Messi's iconic number 10. "
            "Perfect for true football fans and collectors."
        ),
        category="football",
        subcategory="jerseys",
        images=[_PLACEHOLDER] * 4,
        variants=[
            _v("messi-s", "MES-MIA-S", 7999, 9999, 5, size="S"),
            _v("messi-m", "MES-MIA-M", 7999, 9999, 12, size="M"),
            _v("messi-l", "MES-MIA-L", 7999, 9999, 8, size="L"),
            _v("messi-xl", "MES-MIA-XL", 7999, 9999, 3, size="XL"),
            _v("messi-xxl", "MES-MIA-XXL", 8499, 10499, 2, size="XXL"),
        ],
        base_price=7999,
        original_price=9999,
        rating=4.9,
        reviews=2847,
        tags=["Messi", "Inter Miami", "MLS", "Official", "Limited Edition"],
        badges=["FanKick Exclusive", "Limited Stock", "Ships Worldwide"],
        shipping_days=7,
        cod_available=True,
        is_trending=True,
        is_exclusive=True,
        stock_alert="Only 3 left in XL!",
        brand="Adidas",
        materials=["100% Polyester", "Moisture-wicking fabric", "Official team badges"],
        features=["Official Messi name & number", "Team crest and sponsors", "Authentic fit", "Machine washable"],
        size_guide=SizeGuide(
            sizes=["S", "M", "L", "XL", "XXL"],
            measurements={
                "S": 'Chest: 36-38"',
                "M": 'Chest: 38-40"',
                "L": 'Chest: 40-42"',
                "XL": 'Chest: 42-44"',
                "XXL": 'Chest: 44-46"',
            },
        ),
    ),
    Product(
        id="ronaldo-al-nassr-jersey",
        name="Cristiano Ronaldo Al Nassr Jersey 2024 - Official Saudi League Kit",
        description=(
            "Official Cristiano Ronaldo Al Nassr jersey featuring the iconic CR7 branding. Premium quality "
            "with official Saudi Pro League badges and Ronaldo's legendary number 7."
        ),
        category="football",
        subcategory="jerseys",
        images=[_PLACEHOLDER] * 3,
        variants=[
            _v("ronaldo-s", "CR7-NAS-S", 8499, 10999, 8, size="S"),
            _v("ronaldo-m", "CR7-NAS-M", 8499, 10999, 15, size="M"),
            _v("ronaldo-l", "CR7-NAS-L", 8499, 10999, 12, size="L"),
            _v("ronaldo-xl", "CR7-NAS-XL", 8499, 10999, 6, size="XL"),
        ],
        base_price=8499,
        original_price=10999,
        rating=4.8,
        reviews=1923,
        tags=["Ronaldo", "Al Nassr", "Saudi League", "CR7", "Official"],
        badges=["Ships Worldwide", "Trending Now"],
        shipping_days=8,
        cod_available=True,
        is_trending=True,
        is_exclusive=False,
        brand="Nike",
        materials=["Dri-FIT technology", "100% Polyester"],
        features=["Official CR7 name & number", "Al Nassr crest", "Saudi Pro League badges"],
    ),
    Product(
        id="football-boots-predator",
        name="Adidas Predator Elite Football Boots - Messi Edition",
        description=(
            "Professional-grade football boots inspired by Messi's playing style. Features advanced grip "
            "technology, lightweight design, and superior ball control for the perfect game."
        ),
        category="football",
        subcategory="boots",
        images=[_PLACEHOLDER] * 4,
        variants=[
            _v("boots-38", "PRED-38", 12999, 15999, 4, size="6 (EU 38)"),
            _v("boots-39", "PRED-39", 12999, 15999, 8, size="7 (EU 39)"),
            _v("boots-40", "PRED-40", 12999, 15999, 6, size="8 (EU 40)"),
            _v("boots-41", "PRED-41", 12999, 15999, 3, size="9 (EU 41)"),
            _v("boots-42", "PRED-42", 12999, 15999, 2, size="10 (EU 42)"),
        ],
        base_price=12999,
        original_price=15999,
        rating=4.7,
        reviews=892,
        tags=["Football Boots", "Messi", "Predator", "Professional", "Elite"],
        badges=["Limited Stock", "Professional Grade"],
        shipping_days=12,
        cod_available=False,
        is_trending=False,
        is_exclusive=True,
        stock_alert="Low stock alert!",
        brand="Adidas",
        features=["Advanced grip technology", "Lightweight design", "Superior ball control", "Professional grade"],
    ),
    # Anime
    Product(
        id="naruto-akatsuki-ring-set",
        name="Naruto Akatsuki Ring Set - Complete 10 Ring Collection",
        description=(
            "Complete set of 10 official Akatsuki rings from Naruto series. High-quality metal construction "
            "with authentic engravings. Perfect for cosplay and collectors."
        ),
        category="anime",
        subcategory="rings",
        images=[_PLACEHOLDER] * 3,
        variants=[
            _v("akatsuki-full", "NAR-AKA-SET", 1999, 3299, 25, size="Full Set"),
            _v("akatsuki-single", "NAR-AKA-1", 299, 499, 150, size="Single Ring"),
        ],
        base_price=1999,
        original_price=3299,
        rating=4.7,
        reviews=1523,
        tags=["Naruto", "Akatsuki", "Rings", "Cosplay", "Collector"],
        badges=["Fast Selling", "Ships Worldwide"],
        shipping_days=10,
        cod_available=True,
        is_trending=True,
        is_exclusive=False,
        stock_alert="Fast selling!",
        materials=["High-quality metal alloy", "Anti-tarnish coating"],
        features=["Complete 10-ring set", "Authentic engravings", "Adjustable sizes", "Gift box included"],
    ),
    Product(
        id="chainsaw-man-hoodie",
        name="Chainsaw Man Denji Hoodie - Premium Anime Streetwear",
        description=(
            "Premium quality Chainsaw Man hoodie featuring Denji artwork. Ultra-soft cotton blend with "
            "kangaroo pocket and adjustable hood. Perfect for anime fans and streetwear enthusiasts."
        ),
        category="anime",
        subcategory="hoodies",
        images=[_PLACEHOLDER] * 3,
        variants=[
            _v("chainsaw-s-black", "CSM-S-BLK", 2499, 3499, 12, size="S", color="Black"),
            _v("chainsaw-m-black", "CSM-M-BLK", 2499, 3499, 18, size="M", color="Black"),
            _v("chainsaw-l-black", "CSM-L-BLK", 2499, 3499, 15, size="L", color="Black"),
            _v("chainsaw-xl-black", "CSM-XL-BLK", 2499, 3499, 8, size="XL", color="Black"),
            _v("chainsaw-s-white", "CSM-S-WHT", 2499, 3499, 10, size="S", color="White"),
            _v("chainsaw-m-white", "CSM-M-WHT", 2499, 3499, 14, size="M", color="White"),
            _v("chainsaw-l-white", "CSM-L-WHT", 2499, 3499, 11, size="L", color="White"),
        ],
        base_price=2499,
        original_price=3499,
        rating=4.6,
        reviews=987,
        tags=["Chainsaw Man", "Denji", "Hoodie", "Anime", "Streetwear"],
        badges=["Back in Stock", "Premium Quality"],
        shipping_days=10,
        cod_available=True,
        is_trending=False,
        is_exclusive=False,
        stock_alert="Back in stock!",
        materials=["80% Cotton, 20% Polyester", "Pre-shrunk fabric"],
        features=["Premium anime artwork", "Kangaroo pocket", "Adjustable hood", "Unisex design"],
    ),
    Product(
        id="demon-slayer-necklace",
        name="Demon Slayer Tanjiro Hanafuda Earrings Necklace Set",
        description=(
            "Beautiful Demon Slayer inspired necklace featuring Tanjiro's iconic Hanafuda earrings design. "
            "Hypoallergenic materials with adjustable chain length."
        ),
        category="anime",
        subcategory="necklaces",
        images=[_PLACEHOLDER] * 2,
        variants=[_v("tanjiro-necklace", "DS-TAN-NECK", 899, 1299, 35, size="One Size")],
        base_price=899,
        original_price=1299,
        rating=4.5,
        reviews=654,
        tags=["Demon Slayer", "Tanjiro", "Necklace", "Hanafuda", "Jewelry"],
        badges=["Hypoallergenic", "Adjustable"],
        shipping_days=8,
        cod_available=True,
        is_trending=False,
        is_exclusive=False,
        materials=["Stainless steel", "Hypoallergenic coating"],
        features=["Authentic Hanafuda design", 'Adjustable chain 16-20"', "Gift box included"],
    ),
    # Pop culture
    Product(
        id="taylor-swift-eras-hoodie",
        name="Taylor Swift Eras Tour Hoodie - Official Merchandise",
        description=(
            "Official Taylor Swift Eras Tour hoodie featuring iconic tour artwork. Premium cotton blend with "
            "embroidered details and tour dates on the back."
        ),
        category="pop-culture",
        subcategory="hoodies",
        images=[_PLACEHOLDER] * 3,
        variants=[
            _v("eras-s-lavender", "TS-ERAS-S-LAV", 3799, 5499, 8, size="S", color="Lavender"),
            _v("eras-m-lavender", "TS-ERAS-M-LAV", 3799, 5499, 12, size="M", color="Lavender"),
            _v("eras-l-lavender", "TS-ERAS-L-LAV", 3799, 5499, 6, size="L", color="Lavender"),
            _v("eras-xl-lavender", "TS-ERAS-XL-LAV", 3799, 5499, 4, size="XL", color="Lavender"),
            _v("eras-s-black", "TS-ERAS-S-BLK", 3799, 5499, 10, size="S", color="Black"),
            _v("eras-m-black", "TS-ERAS-M-BLK", 3799, 5499, 15, size="M", color="Black"),
        ],
        base_price=3799,
        original_price=5499,
        rating=4.8,
        reviews=3921,
        tags=["Taylor Swift", "Eras Tour", "Official", "Limited Edition", "Concert"],
        badges=["Limited Edition", "Official Merch", "Ships Worldwide"],
        shipping_days=14,
        cod_available=False,
        is_trending=True,
        is_exclusive=True,
        stock_alert="Limited edition - few left!",
        materials=["Premium cotton blend", "Embroidered details"],
        features=["Official tour merchandise", "Embroidered artwork", "Tour dates on back", "Limited edition"],
    ),
    Product(
        id="bts-dynamite-tshirt",
        name="BTS Dynamite Official T-Shirt - K-Pop Merchandise",
        description=(
            "Official BTS Dynamite era t-shirt featuring colorful artwork and member signatures. Comfortable "
            "cotton fabric with vibrant print that won't fade."
        ),
        category="pop-culture",
        subcategory="tshirts",
        images=[_PLACEHOLDER] * 2,
        variants=[
            _v("bts-s", "BTS-DYN-S", 1599, 2299, 20, size="S"),
            _v("bts-m", "BTS-DYN-M", 1599, 2299, 25, size="M"),
            _v("bts-l", "BTS-DYN-L", 1599, 2299, 18, size="L"),
            _v("bts-xl", "BTS-DYN-XL", 1599, 2299, 12, size="XL"),
        ],
        base_price=1599,
        original_price=2299,
        rating=4.7,
        reviews=2156,
        tags=["BTS", "K-pop", "Dynamite", "Official", "ARMY"],
        badges=["Official BTS Merch", "ARMY Approved"],
        shipping_days=12,
        cod_available=True,
        is_trending=True,
        is_exclusive=False,
        materials=["100% Cotton", "Fade-resistant print"],
        features=["Official BTS merchandise", "Member signatures", "Vibrant colors", "Comfortable fit"],
    ),
    Product(
        id="marvel-spiderman-hoodie",
        name="Marvel Spider-Man No Way Home Hoodie - Premium Superhero Apparel",
        description=(
            "Official Marvel Spider-Man No Way Home hoodie featuring the three Spider-Men. Premium quality "
            "with detailed graphics and comfortable fit for superhero fans."
        ),
        category="pop-culture",
        subcategory="hoodies",
        images=[_PLACEHOLDER] * 3,
        variants=[
            _v("spidey-s-red", "MAR-SM-S-RED", 2999, 4299, 15, size="S", color="Red"),
            _v("spidey-m-red", "MAR-SM-M-RED", 2999, 4299, 22, size="M", color="Red"),
            _v("spidey-l-red", "MAR-SM-L-RED", 2999, 4299, 18, size="L", color="Red"),
            _v("spidey-xl-red", "MAR-SM-XL-RED", 2999, 4299, 10, size="XL", color="Red"),
            _v("spidey-s-black", "MAR-SM-S-BLK", 2999, 4299, 12, size="S", color="Black"),
            _v("spidey-m-black", "MAR-SM-M-BLK", 2999, 4299, 16, size="M", color="Black"),
        ],
        base_price=2999,
        original_price=4299,
        rating=4.6,
        reviews=1387,
        tags=["Marvel", "Spider-Man", "No Way Home", "Superhero", "Official"],
        badges=["Marvel Official", "Superhero Collection"],
        shipping_days=11,
        cod_available=True,
        is_trending=False,
        is_exclusive=False,
        materials=["Cotton-polyester blend", "Official Marvel licensing"],
        features=["Three Spider-Men artwork", "Detailed graphics", "Official Marvel merchandise", "Comfortable hood"],
    ),
]


def default_products() -> List[Product]:
    """A fresh list of the bundled products; callers may reorder or extend it."""
    return list(DEFAULT_PRODUCTS)
