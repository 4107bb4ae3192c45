"""PDML example documents"""

EXAMPLE_DOCUMENTS = {
    "home_page": """
page <http://x> = "Home" {
  $title = h1*1;
  item*; { $text = span.label; }
}
""",

    "news_listing": """
page <https://news.ycombinator.com> = "Hacker News" {
    $stories = tr.athing*30; {
        $title = span.titleline;
        $rank = span.rank;
    }
    $more = a.morelink;
}
""",

    "product_catalog": """
page <https://shop.example.com/catalog> = "Catalog" {
    $heading = h1;
    $products = div.product-card*; {
        $name = h3.title;
        $price = span.price;
        $link = a[rel=bookmark];
    }
    $badges = [data-badge=new]*5;
}

page <https://shop.example.com/contact> {
    $address = #address;
    $phones = .phone*;
}
""",

    "empty_page": """
page <https://example.com> {}
""",
}
