"""Books, podcasts and people listed on /recommendations."""

AMAZON = "https://www.amazon.co.uk"

RECOMMENDATIONS = [
    ("Philosophy", "📚", [
        ("Alan Watts", f"{AMAZON}/Alan-Watts/e/B000AP9KWO"),
        ("Modern Man In Search of A Soul", f"{AMAZON}/gp/product/B00R6BGMJO"),
        ("The Power of Myth", f"{AMAZON}/Power-Myth-Joseph-Campbell-ebook/dp/B004QZACH6"),
        ("Finite & Infinite Games", f"{AMAZON}/Finite-Infinite-Games-James-Carse-ebook/dp/B006W45M38"),
        ("What Matters Most", f"{AMAZON}/What-Matters-Most-Living-Considered/dp/1592404995"),
    ]),
    ("Growth / Marketing", "📚", [
        ("Eat Your Greens", f"{AMAZON}/Eat-Your-Greens-Weimer-Snijders-ebook/dp/B07HP9WYVF"),
        ("The Long & The Short Of It", f"{AMAZON}/Long-Short-Balancing-Long-Term-Strategies/dp/085294134X"),
        ("Alchemy", f"{AMAZON}/Alchemy-Surprising-Power-Ideas-Sense-ebook/dp/B01F1HOAWA"),
        ("The Choice Factory", f"{AMAZON}/Choice-Factory-behavioural-biases-influence/dp/085719609X"),
    ]),
    ("Leadership", "📚", [
        ("Turn This Ship Around", f"{AMAZON}/Turn-Ship-Around-Building-Breaking-ebook/dp/B015QQ10HE"),
        ("The Score Takes Care of Itself", f"{AMAZON}/Score-Takes-Care-Itself-Philosophy-ebook/dp/B002G54Y04"),
        ("What You Do Is Who You Are", f"{AMAZON}/What-You-Do-Who-Are-ebook/dp/B07Q4S712S"),
        ("Scaling People", f"{AMAZON}/Scaling-People-Tactics-Management-Building-ebook/dp/B0BRYQJ49K"),
    ]),
    ("Design", "📚", [
        ("The Design of Everyday Things", f"{AMAZON}/Design-Everyday-Things-Revised-Expanded/dp/B07L5VFQ7K"),
        ("The Elements of User Experience", f"{AMAZON}/Elements-User-Experience-User-Centered-Design/dp/0321683684"),
        ("A Timeless Way of Building", f"{AMAZON}/gp/product/0195024028"),
    ]),
    ("Strategy", "📚", [
        ("Business Adventures", f"{AMAZON}/Business-Adventures-Classic-bestseller-business-ebook/dp/B00LX6G752"),
        ("7 Powers", f"{AMAZON}/7-Powers-Foundations-Business-Strategy/dp/0998116319"),
        ("Good Strategy, Bad Strategy", f"{AMAZON}/Good-Strategy-Bad-difference-matters/dp/1781256179"),
    ]),
    ("Podcasts", "🎙️", [
        ("Conversations With Tyler", "https://conversationswithtyler.com/"),
        ("Making Sense", "https://samharris.org/podcast/"),
        ("Marginal Revolution", "https://marginalrevolution.com/"),
        ("Econ Talk", "https://www.econtalk.org/"),
    ]),
    ("Blogs & People", "🌐", [
        ("Strange Loop Canon", "https://www.strangeloopcanon.com/"),
        ("One Useful Thing", "https://www.oneusefulthing.org/"),
        ("Sam Altman", "https://blog.samaltman.com/"),
        ("More To That", "https://moretothat.com/"),
        ("David Perell", "https://www.perell.com/"),
    ]),
]
