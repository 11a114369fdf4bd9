"""Curated concept tables and the fixed Gemini system instruction.

Every theme maps to an ordered tuple of concept strings.  The first concept in
each tuple is the default selected when the user switches to that theme.  The
tables are built once at import time and never mutated.

The concept strings are the Vietnamese captions shown to the user; they are
sent to the model verbatim as the ``Concept:`` line of the composed prompt.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from stylestudio.core.models import Quality, Theme

KOREAN_FASHION_CONCEPTS: tuple[str, ...] = (
    "Phong cách đường phố Hongdae áo khoác da đen cá tính",
    "Cardigan màu pastel nhẹ nhàng trong quán cafe sách ấm cúng",
    "Áo măng tô màu be tối giản thanh lịch giữa trời thu",
    "Áo Hoodie rộng & Quần Jeans ống suông năng động trượt ván",
    "Áo khoác Tweed sang chảnh phong cách tiểu thư Cheongdam",
    "Váy hoa nhí dịu dàng đi dạo trên cánh đồng đảo Jeju",
    "Phong cách sinh viên đại học Seoul năng động với balo",
    "Thời trang sân bay Idol K-pop sành điệu với kính râm",
    "Áo sơ mi trắng & quần âu công sở Hàn Quốc chuyên nghiệp",
    "Phong cách Layer nhiều lớp áo mùa đông Seoul ấm áp",
    "Váy len body quyến rũ dạo phố Gangnam về đêm",
    "Phong cách Retro Y2K Hàn Quốc cá tính đầy màu sắc",
    "Đồng phục nữ sinh trung học Hàn Quốc dễ thương",
    "Hanbok cách tân hiện đại dạo cung điện Gyeongbokgung",
    "Phong cách Ulzzang ngọt ngào với mũ nồi",
    "Trang phục denim-on-denim bụi bặm chất lừ",
    "Váy babydoll dễ thương đi picnic sông Hàn",
    "Phong cách tối giản Minimalism với tông màu trung tính",
)

ENTREPRENEUR_CONCEPTS: tuple[str, ...] = (
    "Văn phòng cao ốc cửa kính view toàn thành phố quyền lực",
    "Phong cách CEO khởi nghiệp công nghệ năng động với Laptop",
    "Diễn giả đang thuyết trình đầy cảm hứng dưới ánh đèn sân khấu",
    "Doanh nhân thành đạt thư giãn trên máy bay tư nhân sang trọng",
    "Không gian làm việc sáng tạo đầy sách phong cách kiến trúc sư",
    "Cuộc họp hội đồng quản trị căng thẳng và chuyên nghiệp",
    "Chụp ảnh profile doanh nhân phông nền xám đẳng cấp",
    "Bắt tay đối tác ký kết hợp đồng tại sảnh khách sạn 5 sao",
    "Làm việc tại quán cafe cao cấp phong cách Digital Nomad",
    "Phỏng vấn báo chí với micro và ánh đèn flash vây quanh",
    "Kiểm tra công trình dự án bất động sản với mũ bảo hộ",
    "Tiệc cocktail giao lưu doanh nhân buổi tối sang trọng",
    "Ngồi ghế da giám đốc quyền lực ký duyệt văn bản",
    "Thuyết trình ý tưởng khởi nghiệp gọi vốn triệu đô",
    "Phong cách Shark Tank đầy bản lĩnh và tự tin",
    "Doanh nhân nữ thành đạt với vest trắng thanh lịch",
    "Đứng khoanh tay tự tin trước trụ sở tập đoàn lớn",
    "Làm việc nhóm brainstorm ý tưởng bên bảng trắng",
)

HANOI_WINTER_CONCEPTS: tuple[str, ...] = (
    "Áo khoác da nâu cổ điển dạo bước bên hồ Hoàn Kiếm sương mù",
    "Khăn len ấm áp & Áo len dày tại quán cafe Phố Cổ rêu phong",
    "Áo dài nhung đỏ truyền thống dạo phố mùa đông cổ kính",
    "Phong cách ảnh phim 35mm bên gánh hàng rong nóng hổi",
    "Sương sớm mờ ảo lãng mạn trước Nhà Thờ Lớn",
    "Phong cách thập niên 90 hoài cổ lãng tử trên xe Vespa cổ",
    "Áo dạ dáng dài bước đi trên thảm lá vàng đường Phan Đình Phùng",
    "Chụp cúc họa mi trắng tinh khôi trong vườn hoa Nhật Tân",
    "Ngồi trà đá vỉa hè giản dị với áo phao dày ấm áp",
    "Hoàng hôn đỏ rực trên cầu Long Biên lộng gió",
    "Áo chần bông xưa cũ bên ô cửa sổ gỗ màu xanh bạc màu",
    "Dạo chợ hoa Quảng Bá tấp nập lúc rạng sáng sương lạnh",
    "Ăn ngô nướng, khoai nướng bên bếp than hồng ấm áp",
    "Chụp ảnh bên tường vàng đặc trưng của phố cổ Hà Nội",
    "Phong cách Vintage với mũ beret và áo len họa tiết",
    "Đạp xe đạp chở đầy hoa trên phố vắng buổi sớm",
    "Ngồi cafe vỉa hè ngắm dòng người qua lại trong mưa phùn",
    "Chụp ảnh với gánh hàng hoa rong rực rỡ sắc màu",
)

INTERNATIONAL_MODEL_CONCEPTS: tuple[str, ...] = (
    "Ảnh bìa tạp chí Vogue thời trang cao cấp đầy thần thái",
    "Quảng cáo trang sức kim cương xa xỉ ánh sáng kịch tính",
    "Sải bước đầy năng lượng trên sàn diễn tuần lễ thời trang Paris",
    "Chụp chân dung nghệ thuật Studio Avant-Garde phá cách",
    "Phong cách Street Style Milan táo bạo, màu sắc và sang trọng",
    "Thảm đỏ sự kiện lộng lẫy với đầm dạ hội Haute Couture đuôi cá",
    "Chụp Lookbook thương hiệu thời trang tối giản trên nền trắng",
    "Concept nàng thơ High-Fashion trong rừng hoa mộng mơ, huyền bí",
    "Thời trang thể thao Sporty Chic năng động trên sân tennis",
    "Chụp beauty cận mặt khoe lớp trang điểm Glass Skin hoàn hảo",
    "Phong cách Cyberpunk tương lai đèn Neon rực rỡ, bí ẩn",
    "Chụp ảnh đen trắng nghệ thuật vượt thời gian, giàu cảm xúc",
    "Tạo dáng bay bổng với vải lụa mềm mại trong studio",
    "Concept nữ thần Hy Lạp quyền lực và quyễ quyến rũ",
    "Thời trang Resort sang chảnh bên hồ bơi vô cực",
    "Chụp ảnh dưới nước nghệ thuật và ma mị",
    "Phong cách menswear nam tính và mạnh mẽ cho nữ",
    "Concept người ngoài hành tinh Alien độc lạ, ấn tượng",
)

FLOWER_MUSE_CONCEPTS: tuple[str, ...] = (
    "Chụp ảnh cùng Cúc Họa Mi trắng tinh khôi giữa vườn hoa bạt ngàn",
    "Nàng thơ e ấp bên hoa Sen hồng dịu dàng đậm chất truyền thống",
    "Váy trắng bồng bềnh giữa cánh đồng hoa Hướng Dương rực rỡ nắng",
    "Chụp ảnh nghệ thuật hoài cổ với hoa Loa Kèn tháng 4 Hà Nội",
    "Phong cách mộng mơ bên giàn hoa Giấy hồng rực rỡ dưới nắng",
    "Dạo bước lãng mạn dưới hàng cây hoa Anh Đào hồng bay trong gió",
    "Vẻ đẹp kiêu sa, quyến rũ bên đóa hoa Hồng nhung đỏ thắm",
    "Chụp ảnh picnic thơ mộng trên đồi hoa Oải Hương tím biếc",
    "Áo dài cách tân duyên dáng bên cành Đào phai đón Tết",
    "Hòa mình vào cánh đồng hoa Cải vàng rực rỡ ven sông thơ mộng",
    "Nét buồn man mác, sâu lắng bên khóm hoa Cẩm Tú Cầu xanh biếc",
    "Chụp chân dung Close-up tinh tế với hoa Baby trắng nhỏ xinh",
    "Nằm mơ màng trên thảm cỏ xanh đầy hoa dại nhỏ xíu",
    "Chụp ảnh phong cách Cottagecore giữa vườn hoa hồng leo",
    "Concept ma mị, bí ẩn với hoa Bỉ Ngạn đỏ rực",
    "Tươi trẻ và rạng rỡ bên khóm hoa Mười Giờ nhiều màu",
    "Thanh lịch và sang trọng bên bình hoa Ly thơm ngát",
    "Hoang dại và tự do giữa cánh đồng hoa Lau trắng muốt",
)

CHRISTMAS_CONCEPTS: tuple[str, ...] = (
    "Váy nhung đỏ trễ vai quyến rũ ngồi giữa 'núi' hộp quà ruy băng vàng sang trọng",
    "Áo choàng lông đỏ lộng lẫy đứng cạnh Ông già Noel tại ngôi làng tuyết Bắc Cực",
    "Bộ đồ Bà già Noel cách tân hiện đại, sexy tạo dáng bên xe trượt tuyết đầy quà",
    "Đầm dạ hội đỏ rực rỡ check-in trong căn phòng ngập tràn bóng bay và hộp quà Giáng sinh",
    "Áo len đỏ họa tiết tuần lộc vui nhộn, ôm hộp quà to trước cây thông Noel lấp lánh",
    "Suit đỏ quyền lực dự tiệc Giáng sinh thượng lưu với background lò sưởi và tất đỏ",
    "Cosplay yêu tinh Giáng sinh tông đỏ-xanh tinh nghịch bên xưởng gói quà của Santa",
    "Áo khoác dạ đỏ dáng dài bước đi giữa chợ Giáng sinh Châu Âu lung linh đèn vàng",
    "Váy sequin đỏ lấp lánh nâng ly rượu vang bên bàn tiệc Giáng sinh bày biện cầu kỳ",
    "Pyjama lụa đỏ sang trọng mở quà Giáng sinh bên lò sưởi rực lửa ấm cúng",
    "Hóa thân Nữ hoàng băng giá váy đỏ quyền lực giữa rừng thông tuyết phủ trắng xóa",
    "Set len đỏ trendy dạo phố tuyết rơi cùng túi quà shopping hàng hiệu trên tay",
    "Chụp ảnh cùng tượng Ông già Noel khổng lồ và túi quà đỏ may mắn",
    "Váy len body đỏ tôn dáng bên vòng nguyệt quế và nến thơm lung linh huyền ảo",
    "Phong cách quý cô Paris áo khoác đỏ, mũ nồi đỏ bên cửa hàng đồ chơi Noel rực rỡ",
    "Nằm duyên dáng trên thảm lông trắng muốt vây quanh là hàng trăm hộp quà xanh đỏ",
    "Chụp cận mặt Makeup tone đỏ Giáng sinh sắc sảo, đội mũ Santa lông trắng",
    "Áo dài đỏ truyền thống Việt Nam check-in tại sảnh khách sạn trang trí Noel lộng lẫy",
)

PRINCESS_MUSE_CONCEPTS: tuple[str, ...] = (
    "Công chúa hoàng gia đội vương miện kim cương, váy xoè lộng lẫy trong lâu đài cổ",
    "Nàng thơ váy voan trắng tinh khôi chạy trên thảo nguyên xanh mướt",
    "Công chúa lọ lem váy xanh ngọc bích đánh rơi giày thuỷ tinh trên cầu thang",
    "Váy tơ lụa hồng phấn mỏng manh, e ấp bên khung cửa sổ ngập nắng",
    "Công chúa ngủ trong rừng với váy thêu hoa hồng gai quyến rũ và bí ẩn",
    "Chất liệu voan kính trong suốt, lấp lánh dạo bước trên bãi biển hoàng hôn",
    "Tiểu thư quý tộc Anh Quốc thưởng trà chiều trong khu vườn hoa hồng rực rỡ",
    "Đầm lụa satin 2 dây quyến rũ mà tinh tế trong không gian phòng ngủ thơ mộng",
    "Công chúa Tuyết với áo choàng lông trắng muốt giữa rừng thông mùa đông",
    "Váy maxi voan hoa nhí bay bổng trong gió chiều Đà Lạt lãng mạn",
    "Nữ hoàng quyền lực váy đỏ nhung ngồi trên ngai vàng vàng son",
    "Váy yếm lụa mềm mại, lưng trần gợi cảm bên hồ sen yên tĩnh",
    "Công chúa tóc mây Rapunzel bên toà tháp cổ với suối tóc dài thướt tha",
    "Chân váy voan tutu nhiều lớp mộng mơ như vũ công ballet giữa phố",
    "Nàng tiên cá váy đuôi cá đính đá lấp lánh trên mỏm đá biển khơi",
    "Áo sơ mi voan mỏng buông lơi kết hợp chân váy lụa dài thướt tha",
    "Công chúa Ba Tư huyền bí with trang phục lụa và trang sức vàng ròng",
    "Váy cưới voan mỏng phong cách Bohemian phóng khoáng giữa thiên nhiên",
)

CHRISTMAS_COUPLE_CONCEPTS: tuple[str, ...] = (
    "Cặp đôi mặc áo len đôi màu đỏ đan tay nhau đi dạo dưới trời tuyết trắng lãng mạn",
    "Chàng trai vest đen, cô gái váy đỏ trao nụ hôn ngọt ngào dưới cây thông Noel khổng lồ",
    "Cùng nhau quấn chung khăn len đỏ, uống cacao nóng bên lò sưởi ấm cúng",
    "Couple đồ trắng tinh khôi, đội mũ len đỏ, cười rạng rỡ giữa chợ Giáng sinh Châu Âu",
    "Cặp đôi mặc Pyjama đôi màu đỏ, cùng mở quà Giáng sinh trên giường",
    "Chụp ảnh Back-hug tình cảm trước ngôi nhà gỗ trang trí đèn led lấp lánh",
    "Chàng trai đeo gạc tuần lộc, cô gái đội mũ Santa tạo dáng nhí nhảnh, đáng yêu",
    "Cặp đôi quý tộc trong trang phục dạ hội Đỏ - Trắng nâng ly rượu vang đêm tiệc",
    "Khoảnh khắc chàng trai tặng hộp quà nhỏ cho cô gái dưới tuyết rơi, ánh mắt tình tứ",
    "Cùng trang trí cây thông Noel, trang phục len màu kem và đỏ ấm áp",
    "Cặp đôi trượt băng nắm tay nhau, trang phục mùa đông phối màu đỏ trắng sành điệu",
    "Ôm nhau âu yếm trên sofa, đắp chăn len đỏ, xung quanh là ánh nến lung linh",
    "Chụp ảnh style Hàn Quốc: Áo khoác dạ đôi màu be và khăn quàng đỏ nổi bật",
    "Cặp đôi dạo bước trong rừng thông phủ tuyết trắng xoá, không gian cổ tích",
    "Chàng trai cõng cô gái trên lưng, cả hai cùng cười đùa vui vẻ trong bộ đồ Noel",
    "Set đồ len vặn thừng màu trắng kem, cùng cầm pháo bông que sáng rực rỡ",
    "Cặp đôi khiêu vũ dưới ánh đèn đường vàng vọt và tuyết rơi nhẹ nhàng",
    "Chụp concept 'Lady & The Tramp' phiên bản Giáng sinh với bàn tiệc tối lãng mạn",
)

SINGER_CONCEPTS: tuple[str, ...] = (
    "Biểu diễn trên sân khấu concert hoành tráng với ánh đèn lộng lẫy, tay cầm mic hát đầy cảm xúc",
    "Phong cách Diva sang trọng trong đầm dạ hội, hát bên micro đứng cổ điển trong nhà hát cổ kính",
    "Ca sỹ Rock cá tính với mic có dây, trình diễn bùng nổ dưới ánh đèn laser và khói sân khấu mờ ảo",
    "Concept Idol K-pop năng động với mic cầm tay, trang phục biểu diễn sành điệu trên sân khấu âm nhạc",
    "Acoustic chill: Ngồi trên ghế cao, ôm đàn guitar và hát mộc mạc bên micro thu âm cao cấp",
    "Phòng thu âm chuyên nghiệp: Đeo tai nghe studio, hát trước micro lọc âm (pop filter) trong phòng cách âm",
    "Buổi biểu diễn Jazz Unplugged ấm cúng trong quán bar sang trọng với ánh nến và micro vintage",
    "Sân vận động rực rỡ ánh đèn lightstick từ hàng vạn khán giả, ca sỹ giơ mic về phía fan quyền lực",
    "Hát chính trong ban nhạc sống, phong cách Retro thập niên 80 với trang phục sequin lấp lánh",
    "Chụp ảnh cover album: Tạo dáng nghệ thuật bên micro trong studio ánh sáng kịch tính",
    "Biểu diễn nhạc kịch Broadway: Trang phục cầu kỳ, diễn xuất cùng micro cài đầu (headset mic)",
    "Ca sỹ hát tình ca bên phông nền thành phố về đêm, tay cầm mic vàng sang trọng",
    "Trình diễn tại lễ hội âm nhạc ngoài trời, gió thổi tóc bay, tay cầm mic đầy tự do",
    "Concept thiên thần: Mặc váy trắng, đeo cánh, hát giữa làn khói trắng và ánh sáng thiên đường",
)

# Custom mode has no real concept list, only a placeholder caption.
CUSTOM_CONCEPT_PLACEHOLDER = "Sáng tạo theo phong cách riêng của bạn"
CUSTOM_CONCEPTS: tuple[str, ...] = (CUSTOM_CONCEPT_PLACEHOLDER,)

THEME_CONCEPTS: Mapping[Theme, tuple[str, ...]] = MappingProxyType(
    {
        Theme.KOREAN: KOREAN_FASHION_CONCEPTS,
        Theme.ENTREPRENEUR: ENTREPRENEUR_CONCEPTS,
        Theme.HANOI_WINTER: HANOI_WINTER_CONCEPTS,
        Theme.INTERNATIONAL_MODEL: INTERNATIONAL_MODEL_CONCEPTS,
        Theme.FLOWER_MUSE: FLOWER_MUSE_CONCEPTS,
        Theme.CHRISTMAS: CHRISTMAS_CONCEPTS,
        Theme.PRINCESS_MUSE: PRINCESS_MUSE_CONCEPTS,
        Theme.CHRISTMAS_COUPLE: CHRISTMAS_COUPLE_CONCEPTS,
        Theme.SINGER: SINGER_CONCEPTS,
        Theme.CUSTOM: CUSTOM_CONCEPTS,
    }
)

THEME_LABELS: Mapping[Theme, str] = MappingProxyType(
    {
        Theme.KOREAN: "Hàn Quốc",
        Theme.ENTREPRENEUR: "Doanh nhân",
        Theme.HANOI_WINTER: "Hà Nội Đông",
        Theme.INTERNATIONAL_MODEL: "Siêu Mẫu QT",
        Theme.FLOWER_MUSE: "Nàng Thơ & Hoa",
        Theme.CHRISTMAS: "Giáng Sinh",
        Theme.PRINCESS_MUSE: "Công Chúa",
        Theme.CHRISTMAS_COUPLE: "Cặp Đôi Noel",
        Theme.SINGER: "Ca Sỹ",
        Theme.CUSTOM: "Tự Do",
    }
)

QUALITY_LABELS: Mapping[Quality, str] = MappingProxyType(
    {
        Quality.STANDARD: "Tiêu chuẩn",
        Quality.HIGH: "Cao",
        Quality.ULTRA: "Siêu nét",
    }
)

SYSTEM_INSTRUCTION = (
    "You are a world-class AI photographer and image editor specializing in "
    "high-fashion, portrait, and lifestyle photography. \n"
    "Your goal is to transform input images into premium, photorealistic masterpieces "
    "based on specific themes while maintaining the identity of the subject."
)


def get_concepts(theme: Theme | str) -> tuple[str, ...]:
    """Return the ordered concept list for *theme*.

    Raises:
        ValueError: If *theme* is not a known theme id.
    """
    return THEME_CONCEPTS[Theme(theme)]


def default_concept(theme: Theme | str) -> str:
    """Return the concept preselected when switching to *theme*."""
    return get_concepts(theme)[0]
