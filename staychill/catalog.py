"""Static destination catalog for the North Coast listings.

Loaded once at import time and never mutated.
"""

from staychill.schemas.location import (
    Activity,
    BestTimeToVisit,
    GettingThere,
    Highlight,
    LocalTip,
    LocationRecord,
    MapLocation,
    Neighborhood,
    Weather,
)

_LOCATIONS: tuple[LocationRecord, ...] = (
    LocationRecord(
        id="sahel",
        nameEn="Egyptian North Coast (Sahel)",
        nameAr="الساحل الشمالي المصري",
        regionEn="Mediterranean Coast",
        regionAr="ساحل البحر المتوسط",
        descriptionEn=(
            "The North Coast of Egypt, locally known as Sahel, stretches along the "
            "Mediterranean Sea from Alexandria to Marsa Matruh, offering pristine beaches "
            "with crystal-clear turquoise waters. This premier summer destination features "
            "exclusive resorts, vibrant beach clubs, and luxurious vacation homes."
        ),
        descriptionAr=(
            "يمتد الساحل الشمالي لمصر، المعروف محليًا باسم الساحل، على طول البحر المتوسط "
            "من الإسكندرية إلى مرسى مطروح، ويقدم شواطئ بكر ذات مياه فيروزية صافية. تضم هذه "
            "الوجهة الصيفية الرائدة منتجعات حصرية ونوادي شاطئية نابضة بالحياة ومنازل عطلات فاخرة."
        ),
        highlights=(
            Highlight(
                titleEn="Pristine Beaches",
                titleAr="شواطئ بكر",
                descriptionEn="Miles of white sandy beaches with crystal-clear turquoise waters.",
                descriptionAr="أميال من الشواطئ الرملية البيضاء ذات المياه الفيروزية الصافية.",
                iconName="Beach",
            ),
            Highlight(
                titleEn="Exclusive Resorts",
                titleAr="منتجعات حصرية",
                descriptionEn="Luxury resorts and compounds with private beach access.",
                descriptionAr="منتجعات ومجمعات فاخرة مع إمكانية الوصول إلى الشاطئ الخاص.",
                iconName="Hotel",
            ),
            Highlight(
                titleEn="Vibrant Beach Clubs",
                titleAr="نوادي شاطئية نابضة بالحياة",
                descriptionEn="Trendy beach clubs with pools, music, and a social atmosphere.",
                descriptionAr="نوادي شاطئية عصرية مع أحواض سباحة وموسيقى وأجواء اجتماعية.",
                iconName="Music",
            ),
        ),
        activities=(
            Activity(nameEn="Beach Relaxation", nameAr="الاسترخاء على الشاطئ", iconName="Sun"),
            Activity(nameEn="Water Sports", nameAr="الرياضات المائية", iconName="Sailboat"),
            Activity(nameEn="Beach Clubs", nameAr="النوادي الشاطئية", iconName="Cocktail"),
            Activity(nameEn="Seaside Dining", nameAr="تناول الطعام بجانب البحر", iconName="Fish"),
            Activity(nameEn="Shopping", nameAr="التسوق", iconName="ShoppingBag"),
        ),
        bestTimeToVisit=BestTimeToVisit(
            seasonsEn=("Summer",),
            seasonsAr=("الصيف",),
            notesEn="Peak season runs from June to September.",
            notesAr="موسم الذروة يمتد من يونيو إلى سبتمبر.",
        ),
        weather=Weather(
            summerTempRange="25°C - 32°C",
            winterTempRange="12°C - 20°C",
            rainfallEn="Minimal rainfall during summer months, occasional showers in winter.",
            rainfallAr="هطول أمطار قليل خلال أشهر الصيف، زخات عرضية في الشتاء.",
        ),
        gettingThere=GettingThere(
            fromCairoEn="Approximately 2-3 hours by car via Cairo-Alexandria Desert Road.",
            fromCairoAr="حوالي 2-3 ساعات بالسيارة عبر طريق القاهرة-الإسكندرية الصحراوي.",
            fromAlexEn="From Alexandria, 30 minutes to 2 hours depending on the destination.",
            fromAlexAr="من الإسكندرية، 30 دقيقة إلى ساعتين حسب الوجهة.",
            nearestAirportEn="Borg El Arab International Airport or El Alamein International Airport.",
            nearestAirportAr="مطار برج العرب الدولي أو مطار العلمين الدولي.",
        ),
        neighborhoods=(
            Neighborhood(
                id="marina-el-alamein",
                nameEn="Marina El Alamein",
                nameAr="مارينا العلمين",
                descriptionEn="One of the first developed resort areas in Sahel, with a marina and golf course.",
                descriptionAr="واحدة من أولى مناطق المنتجعات المطورة في الساحل، وتضم مرسى ليخوت وملعب غولف.",
                propertyTypes=("apartments", "villas", "chalets"),
            ),
            Neighborhood(
                id="marassi",
                nameEn="Marassi",
                nameAr="مراسي",
                descriptionEn="Upscale resort community with international beach clubs.",
                descriptionAr="مجتمع منتجع متكامل راقي مع نوادي شاطئية دولية.",
                propertyTypes=("apartments", "villas", "twin houses"),
            ),
            Neighborhood(
                id="hacienda-bay",
                nameEn="Hacienda Bay",
                nameAr="هاسيندا باي",
                descriptionEn="Popular compound with beautiful beaches and a family-friendly atmosphere.",
                descriptionAr="مجمع شهير مع شواطئ جميلة وأجواء مناسبة للعائلات.",
                propertyTypes=("chalets", "villas", "twin houses"),
            ),
            Neighborhood(
                id="almaza-bay",
                nameEn="Almaza Bay",
                nameAr="الماظة باي",
                descriptionEn="Luxurious beachfront development with crystal-clear turquoise waters.",
                descriptionAr="تطوير فاخر على الواجهة البحرية مع مياه فيروزية صافية.",
                propertyTypes=("apartments", "chalets", "cabanas"),
            ),
        ),
        localTips=(
            LocalTip(
                tipEn="Book accommodations well in advance for the summer season, especially weekends.",
                tipAr="احجز أماكن الإقامة قبل موسم الصيف بوقت كافٍ، خاصة في عطلات نهاية الأسبوع.",
                categoryEn="Activities",
                categoryAr="الأنشطة",
            ),
            LocalTip(
                tipEn="Traffic can be heavy on Thursday and Friday evenings.",
                tipAr="يمكن أن تكون حركة المرور كثيفة مساء الخميس والجمعة.",
                categoryEn="Transportation",
                categoryAr="المواصلات",
            ),
            LocalTip(
                tipEn="Fresh seafood is a must-try in restaurants along the coast.",
                tipAr="يجب تجربة المأكولات البحرية الطازجة في المطاعم على طول الساحل.",
                categoryEn="Food",
                categoryAr="الطعام",
            ),
        ),
        images=(
            "/images/destinations/sahel-beach.jpg",
            "/images/destinations/sahel-resort.jpg",
            "/images/destinations/sahel-beachclub.jpg",
            "/images/destinations/sahel-watersports.jpg",
        ),
        mapLocation=MapLocation(latitude=30.8503, longitude=28.9471, zoomLevel=9),
    ),
    LocationRecord(
        id="ras-el-hekma",
        nameEn="Ras El Hekma",
        nameAr="رأس الحكمة",
        regionEn="North Coast",
        regionAr="الساحل الشمالي",
        descriptionEn=(
            "Ras El Hekma is a pristine coastal paradise on Egypt's North Coast, known for "
            "its unspoiled beaches and crystal-clear turquoise waters. It offers a more "
            "secluded alternative to the busier parts of Sahel."
        ),
        descriptionAr=(
            "رأس الحكمة هي جنة ساحلية بكر تقع على الساحل الشمالي لمصر، وتشتهر بشواطئها النقية "
            "ومياهها الفيروزية الصافية. توفر بديلاً أكثر هدوءًا من الأجزاء الأكثر ازدحامًا في الساحل."
        ),
        highlights=(
            Highlight(
                titleEn="Secluded Beaches",
                titleAr="شواطئ معزولة",
                descriptionEn="Fine white sand and clear azure waters, often less crowded.",
                descriptionAr="رمال بيضاء ناعمة ومياه زرقاء صافية، وغالبًا ما تكون أقل ازدحامًا.",
                iconName="Beach",
            ),
            Highlight(
                titleEn="Protected Bay",
                titleAr="خليج محمي",
                descriptionEn="A crescent-shaped bay with calm waters ideal for swimming.",
                descriptionAr="خليج على شكل هلال بمياه هادئة مثالية للسباحة.",
                iconName="Waves",
            ),
        ),
        activities=(
            Activity(nameEn="Beach Relaxation", nameAr="الاسترخاء على الشاطئ", iconName="Sun"),
            Activity(nameEn="Swimming", nameAr="السباحة", iconName="Swimmer"),
            Activity(nameEn="Snorkeling", nameAr="الغطس", iconName="Dive"),
            Activity(nameEn="Sunset Watching", nameAr="مشاهدة غروب الشمس", iconName="Sunset"),
        ),
        bestTimeToVisit=BestTimeToVisit(
            seasonsEn=("Summer",),
            seasonsAr=("الصيف",),
            notesEn="May through October offers ideal weather; July and August are peak season.",
            notesAr="يوفر شهر مايو حتى أكتوبر طقسًا مثاليًا. يوليو وأغسطس هما موسم الذروة.",
        ),
        weather=Weather(
            summerTempRange="25°C - 35°C",
            winterTempRange="14°C - 22°C",
            rainfallEn="Very minimal rainfall in summer, occasional light showers in winter months.",
            rainfallAr="هطول أمطار قليل جدًا في الصيف، زخات خفيفة متفرقة في أشهر الشتاء.",
        ),
        gettingThere=GettingThere(
            fromCairoEn="Approximately 3-3.5 hours by car via the Desert Road and Coastal Road.",
            fromCairoAr="حوالي 3-3.5 ساعات بالسيارة عبر الطريق الصحراوي والطريق الساحلي.",
            fromAlexEn="About 2-2.5 hours from Alexandria via the Coastal Road.",
            fromAlexAr="حوالي 2-2.5 ساعة من الإسكندرية عبر الطريق الساحلي.",
            nearestAirportEn="El Alamein International Airport (30-40 minutes by car).",
            nearestAirportAr="مطار العلمين الدولي (حوالي 30-40 دقيقة بالسيارة).",
        ),
        neighborhoods=(
            Neighborhood(
                id="ras-el-hekma-bay",
                nameEn="Ras El Hekma Bay",
                nameAr="خليج رأس الحكمة",
                descriptionEn="The main bay area with the clearest waters in the region.",
                descriptionAr="منطقة الخليج الرئيسية ذات المياه الأكثر صفاءً في المنطقة.",
                propertyTypes=("villas", "chalets", "luxury resorts"),
            ),
            Neighborhood(
                id="fouka-bay",
                nameEn="Fouka Bay",
                nameAr="فوكا باي",
                descriptionEn="Luxury development with contemporary architecture and exclusive beach access.",
                descriptionAr="منطقة تطوير فاخرة ذات عمارة معاصرة وإمكانية الوصول الحصري إلى الشاطئ.",
                propertyTypes=("chalets", "twin houses", "apartments"),
            ),
            Neighborhood(
                id="tal-hekma",
                nameEn="Tal Hekma",
                nameAr="تل الحكمة",
                descriptionEn="Elevated area with panoramic views of the Mediterranean Sea.",
                descriptionAr="منطقة مرتفعة توفر إطلالات بانورامية على البحر المتوسط.",
                propertyTypes=("villas", "luxury compounds"),
            ),
        ),
        localTips=(
            LocalTip(
                tipEn="The area is still developing, so stock up on necessities before arriving.",
                tipAr="المنطقة لا تزال قيد التطوير، لذا قم بتخزين الضروريات قبل الوصول.",
                categoryEn="Budget",
                categoryAr="الميزانية",
            ),
            LocalTip(
                tipEn="The waters are generally calm, making it ideal for families with children.",
                tipAr="المياه هادئة بشكل عام، مما يجعلها مثالية للعائلات التي لديها أطفال.",
                categoryEn="Safety",
                categoryAr="الأمان",
            ),
        ),
        images=(
            "/images/destinations/ras-el-hekma-bay.jpg",
            "/images/destinations/ras-el-hekma-beach.jpg",
            "/images/destinations/ras-el-hekma-shore.jpg",
            "/images/destinations/ras-el-hekma-resort.jpg",
        ),
        mapLocation=MapLocation(latitude=31.0944, longitude=28.3436, zoomLevel=12),
    ),
)


def get_all_locations() -> tuple[LocationRecord, ...]:
    return _LOCATIONS


def get_location_by_id(location_id: str) -> LocationRecord | None:
    for location in _LOCATIONS:
        if location.id == location_id:
            return location
    return None
