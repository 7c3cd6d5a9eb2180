"""
Bangladesh administrative hierarchy: Division -> District -> Upazila.

Row formats:
    DIVISION_ROWS: (id, name, name_local, aliases)
    DISTRICT_ROWS: (id, name, name_local, division_id, aliases)
    UPAZILA_ROWS:  { district_id: ((name, name_local), ...) }

Division names are the uppercase values accepted by the address table's
`Division` enum. Upazila ids are derived as <district id><2-digit index>,
so the order inside each district tuple is part of the data contract:
append new upazilas, never reorder.
"""
from typing import Dict, Tuple


# Values accepted by the address table's Division enum
DIVISION_NAMES: Tuple[str, ...] = (
    "BARISHAL", "CHITTAGONG", "DHAKA", "KHULNA",
    "MYMENSINGH", "RAJSHAHI", "RANGPUR", "SYLHET",
)

DIVISION_ROWS: Tuple[Tuple[str, str, str, Tuple[str, ...]], ...] = (
    ("1", "BARISHAL", "বরিশাল", ("Barisal",)),
    ("2", "CHITTAGONG", "চট্টগ্রাম", ("Chattogram",)),
    ("3", "DHAKA", "ঢাকা", ()),
    ("4", "KHULNA", "খুলনা", ()),
    ("5", "MYMENSINGH", "ময়মনসিংহ", ()),
    ("6", "RAJSHAHI", "রাজশাহী", ()),
    ("7", "RANGPUR", "রংপুর", ()),
    ("8", "SYLHET", "সিলেট", ()),
)


DISTRICT_ROWS: Tuple[Tuple[str, str, str, str, Tuple[str, ...]], ...] = (
    # Barishal
    ("101", "Barguna", "বরগুনা", "1", ()),
    ("102", "Barishal", "বরিশাল", "1", ("Barisal",)),
    ("103", "Bhola", "ভোলা", "1", ()),
    ("104", "Jhalokati", "ঝালকাঠি", "1", ("Jhalakathi",)),
    ("105", "Patuakhali", "পটুয়াখালী", "1", ()),
    ("106", "Pirojpur", "পিরোজপুর", "1", ()),

    # Chattogram
    ("201", "Bandarban", "বান্দরবান", "2", ()),
    ("202", "Brahmanbaria", "ব্রাহ্মণবাড়িয়া", "2", ()),
    ("203", "Chandpur", "চাঁদপুর", "2", ()),
    ("204", "Chattogram", "চট্টগ্রাম", "2", ("Chittagong",)),
    ("205", "Cumilla", "কুমিল্লা", "2", ("Comilla",)),
    ("206", "Cox's Bazar", "কক্সবাজার", "2", ("Coxs Bazar",)),
    ("207", "Feni", "ফেনী", "2", ()),
    ("208", "Khagrachari", "খাগড়াছড়ি", "2", ("Khagrachhari",)),
    ("209", "Lakshmipur", "লক্ষ্মীপুর", "2", ()),
    ("210", "Noakhali", "নোয়াখালী", "2", ()),
    ("211", "Rangamati", "রাঙামাটি", "2", ()),

    # Dhaka
    ("301", "Dhaka", "ঢাকা", "3", ()),
    ("302", "Faridpur", "ফরিদপুর", "3", ()),
    ("303", "Gazipur", "গাজীপুর", "3", ()),
    ("304", "Gopalganj", "গোপালগঞ্জ", "3", ()),
    ("305", "Kishoreganj", "কিশোরগঞ্জ", "3", ()),
    ("306", "Madaripur", "মাদারীপুর", "3", ()),
    ("307", "Manikganj", "মানিকগঞ্জ", "3", ()),
    ("308", "Munshiganj", "মুন্সিগঞ্জ", "3", ()),
    ("309", "Narayanganj", "নারায়ণগঞ্জ", "3", ()),
    ("310", "Narsingdi", "নরসিংদী", "3", ()),
    ("311", "Rajbari", "রাজবাড়ী", "3", ()),
    ("312", "Shariatpur", "শরীয়তপুর", "3", ()),
    ("313", "Tangail", "টাঙ্গাইল", "3", ()),

    # Khulna
    ("401", "Bagerhat", "বাগেরহাট", "4", ()),
    ("402", "Chuadanga", "চুয়াডাঙ্গা", "4", ()),
    ("403", "Jashore", "যশোর", "4", ("Jessore",)),
    ("404", "Jhenaidah", "ঝিনাইদহ", "4", ()),
    ("405", "Khulna", "খুলনা", "4", ()),
    ("406", "Kushtia", "কুষ্টিয়া", "4", ()),
    ("407", "Magura", "মাগুরা", "4", ()),
    ("408", "Meherpur", "মেহেরপুর", "4", ()),
    ("409", "Narail", "নড়াইল", "4", ()),
    ("410", "Satkhira", "সাতক্ষীরা", "4", ()),

    # Mymensingh
    ("501", "Jamalpur", "জামালপুর", "5", ()),
    ("502", "Mymensingh", "ময়মনসিংহ", "5", ()),
    ("503", "Netrokona", "নেত্রকোনা", "5", ("Netrakona",)),
    ("504", "Sherpur", "শেরপুর", "5", ()),

    # Rajshahi
    ("601", "Bogura", "বগুড়া", "6", ("Bogra",)),
    ("602", "Chapainawabganj", "চাঁপাইনবাবগঞ্জ", "6", ("Chapai Nawabganj", "Nawabganj")),
    ("603", "Joypurhat", "জয়পুরহাট", "6", ()),
    ("604", "Naogaon", "নওগাঁ", "6", ()),
    ("605", "Natore", "নাটোর", "6", ()),
    ("606", "Pabna", "পাবনা", "6", ()),
    ("607", "Rajshahi", "রাজশাহী", "6", ()),
    ("608", "Sirajganj", "সিরাজগঞ্জ", "6", ()),

    # Rangpur
    ("701", "Dinajpur", "দিনাজপুর", "7", ()),
    ("702", "Gaibandha", "গাইবান্ধা", "7", ()),
    ("703", "Kurigram", "কুড়িগ্রাম", "7", ()),
    ("704", "Lalmonirhat", "লালমনিরহাট", "7", ()),
    ("705", "Nilphamari", "নীলফামারী", "7", ()),
    ("706", "Panchagarh", "পঞ্চগড়", "7", ()),
    ("707", "Rangpur", "রংপুর", "7", ()),
    ("708", "Thakurgaon", "ঠাকুরগাঁও", "7", ()),

    # Sylhet
    ("801", "Habiganj", "হবিগঞ্জ", "8", ()),
    ("802", "Moulvibazar", "মৌলভীবাজার", "8", ("Maulvibazar",)),
    ("803", "Sunamganj", "সুনামগঞ্জ", "8", ()),
    ("804", "Sylhet", "সিলেট", "8", ()),
)


UPAZILA_ROWS: Dict[str, Tuple[Tuple[str, str], ...]] = {
    # ─── Barishal ────────────────────────────────────────────────────────
    "101": (
        ("Amtali", "আমতলী"), ("Bamna", "বামনা"), ("Barguna Sadar", "বরগুনা সদর"),
        ("Betagi", "বেতাগী"), ("Patharghata", "পাথরঘাটা"), ("Taltali", "তালতলী"),
    ),
    "102": (
        ("Agailjhara", "আগৈলঝাড়া"), ("Babuganj", "বাবুগঞ্জ"), ("Bakerganj", "বাকেরগঞ্জ"),
        ("Banaripara", "বানারীপাড়া"), ("Barishal Sadar", "বরিশাল সদর"), ("Gaurnadi", "গৌরনদী"),
        ("Hizla", "হিজলা"), ("Mehendiganj", "মেহেন্দিগঞ্জ"), ("Muladi", "মুলাদী"),
        ("Wazirpur", "উজিরপুর"),
    ),
    "103": (
        ("Bhola Sadar", "ভোলা সদর"), ("Burhanuddin", "বোরহানউদ্দিন"), ("Char Fasson", "চরফ্যাশন"),
        ("Daulatkhan", "দৌলতখান"), ("Lalmohan", "লালমোহন"), ("Manpura", "মনপুরা"),
        ("Tazumuddin", "তজুমদ্দিন"),
    ),
    "104": (
        ("Jhalokati Sadar", "ঝালকাঠি সদর"), ("Kathalia", "কাঠালিয়া"), ("Nalchity", "নলছিটি"),
        ("Rajapur", "রাজাপুর"),
    ),
    "105": (
        ("Bauphal", "বাউফল"), ("Dashmina", "দশমিনা"), ("Dumki", "দুমকি"),
        ("Galachipa", "গলাচিপা"), ("Kalapara", "কলাপাড়া"), ("Mirzaganj", "মির্জাগঞ্জ"),
        ("Patuakhali Sadar", "পটুয়াখালী সদর"), ("Rangabali", "রাঙ্গাবালী"),
    ),
    "106": (
        ("Bhandaria", "ভান্ডারিয়া"), ("Indurkani", "ইন্দুরকানী"), ("Kawkhali", "কাউখালী"),
        ("Mathbaria", "মঠবাড়িয়া"), ("Nazirpur", "নাজিরপুর"), ("Nesarabad", "নেছারাবাদ"),
        ("Pirojpur Sadar", "পিরোজপুর সদর"),
    ),

    # ─── Chattogram ──────────────────────────────────────────────────────
    "201": (
        ("Alikadam", "আলীকদম"), ("Bandarban Sadar", "বান্দরবান সদর"), ("Lama", "লামা"),
        ("Naikhongchhari", "নাইক্ষ্যংছড়ি"), ("Rowangchhari", "রোয়াংছড়ি"), ("Ruma", "রুমা"),
        ("Thanchi", "থানচি"),
    ),
    "202": (
        ("Akhaura", "আখাউড়া"), ("Ashuganj", "আশুগঞ্জ"), ("Bancharampur", "বাঞ্ছারামপুর"),
        ("Bijoynagar", "বিজয়নগর"), ("Brahmanbaria Sadar", "ব্রাহ্মণবাড়িয়া সদর"), ("Kasba", "কসবা"),
        ("Nabinagar", "নবীনগর"), ("Nasirnagar", "নাসিরনগর"), ("Sarail", "সরাইল"),
    ),
    "203": (
        ("Chandpur Sadar", "চাঁদপুর সদর"), ("Faridganj", "ফরিদগঞ্জ"), ("Haimchar", "হাইমচর"),
        ("Hajiganj", "হাজীগঞ্জ"), ("Kachua", "কচুয়া"), ("Matlab Dakshin", "মতলব দক্ষিণ"),
        ("Matlab Uttar", "মতলব উত্তর"), ("Shahrasti", "শাহরাস্তি"),
    ),
    "204": (
        ("Anwara", "আনোয়ারা"), ("Banshkhali", "বাঁশখালী"), ("Boalkhali", "বোয়ালখালী"),
        ("Chattogram Sadar", "চট্টগ্রাম সদর"), ("Fatikchhari", "ফটিকছড়ি"), ("Hathazari", "হাটহাজারী"),
        ("Lohagara", "লোহাগাড়া"), ("Mirsharai", "মীরসরাই"), ("Patiya", "পটিয়া"),
        ("Rangunia", "রাঙ্গুনিয়া"), ("Raozan", "রাউজান"), ("Sandwip", "সন্দ্বীপ"),
        ("Satkania", "সাতকানিয়া"), ("Sitakunda", "সীতাকুণ্ড"), ("Chandanaish", "চন্দনাইশ"),
        ("Karnaphuli", "কর্ণফুলী"),
    ),
    "205": (
        ("Barura", "বরুড়া"), ("Brahmanpara", "ব্রাহ্মণপাড়া"), ("Burichang", "বুড়িচাং"),
        ("Chandina", "চান্দিনা"), ("Chauddagram", "চৌদ্দগ্রাম"), ("Daudkandi", "দাউদকান্দি"),
        ("Debidwar", "দেবীদ্বার"), ("Homna", "হোমনা"), ("Laksam", "লাকসাম"),
        ("Muradnagar", "মুরাদনগর"), ("Nangalkot", "নাঙ্গলকোট"), ("Cumilla Sadar", "কুমিল্লা সদর"),
        ("Titas", "তিতাস"), ("Lalmai", "লালমাই"), ("Manoharganj", "মনোহরগঞ্জ"),
        ("Meghna", "মেঘনা"), ("Sadar Dakshin", "সদর দক্ষিণ"),
    ),
    "206": (
        ("Chakaria", "চকরিয়া"), ("Cox's Bazar Sadar", "কক্সবাজার সদর"), ("Kutubdia", "কুতুবদিয়া"),
        ("Maheshkhali", "মহেশখালী"), ("Pekua", "পেকুয়া"), ("Ramu", "রামু"),
        ("Teknaf", "টেকনাফ"), ("Ukhia", "উখিয়া"), ("Eidgaon", "ঈদগাঁও"),
    ),
    "207": (
        ("Chhagalnaiya", "ছাগলনাইয়া"), ("Daganbhuiyan", "দাগনভূঞা"), ("Feni Sadar", "ফেনী সদর"),
        ("Fulgazi", "ফুলগাজী"), ("Parshuram", "পরশুরাম"), ("Sonagazi", "সোনাগাজী"),
    ),
    "208": (
        ("Dighinala", "দীঘিনালা"), ("Guimara", "গুইমারা"), ("Khagrachari Sadar", "খাগড়াছড়ি সদর"),
        ("Lakshmichhari", "লক্ষ্মীছড়ি"), ("Mahalchhari", "মহালছড়ি"), ("Manikchhari", "মানিকছড়ি"),
        ("Matiranga", "মাটিরাঙ্গা"), ("Panchhari", "পানছড়ি"), ("Ramgarh", "রামগড়"),
    ),
    "209": (
        ("Kamalnagar", "কমলনগর"), ("Lakshmipur Sadar", "লক্ষ্মীপুর সদর"), ("Raipur", "রায়পুর"),
        ("Ramganj", "রামগঞ্জ"), ("Ramgati", "রামগতি"),
    ),
    "210": (
        ("Begumganj", "বেগমগঞ্জ"), ("Chatkhil", "চাটখিল"), ("Companiganj", "কোম্পানীগঞ্জ"),
        ("Hatiya", "হাতিয়া"), ("Kabirhat", "কবিরহাট"), ("Noakhali Sadar", "নোয়াখালী সদর"),
        ("Senbagh", "সেনবাগ"), ("Sonaimuri", "সোনাইমুড়ী"), ("Subarnachar", "সুবর্ণচর"),
    ),
    "211": (
        ("Baghaichhari", "বাঘাইছড়ি"), ("Barkal", "বরকল"), ("Belaichhari", "বিলাইছড়ি"),
        ("Juraichhari", "জুরাছড়ি"), ("Kaptai", "কাপ্তাই"), ("Kawkhali", "কাউখালী"),
        ("Langadu", "লংগদু"), ("Naniarchar", "নানিয়ারচর"), ("Rajasthali", "রাজস্থলী"),
        ("Rangamati Sadar", "রাঙ্গামাটি সদর"),
    ),

    # ─── Dhaka ───────────────────────────────────────────────────────────
    "301": (
        ("Dhamrai", "ধামরাই"), ("Dohar", "দোহার"), ("Keraniganj", "কেরানীগঞ্জ"),
        ("Nawabganj", "নবাবগঞ্জ"), ("Savar", "সাভার"), ("Dhaka Sadar", "ঢাকা সদর"),
    ),
    "302": (
        ("Alfadanga", "আলফাডাঙ্গা"), ("Bhanga", "ভাঙ্গা"), ("Boalmari", "বোয়ালমারী"),
        ("Charbhadrasan", "চরভদ্রাসন"), ("Faridpur Sadar", "ফরিদপুর সদর"), ("Madhukhali", "মধুখালী"),
        ("Nagarkanda", "নগরকান্দা"), ("Sadarpur", "সদরপুর"), ("Saltha", "সালথা"),
    ),
    "303": (
        ("Gazipur Sadar", "গাজীপুর সদর"), ("Kaliakair", "কালিয়াকৈর"), ("Kaliganj", "কালীগঞ্জ"),
        ("Kapasia", "কাপাসিয়া"), ("Sreepur", "শ্রীপুর"),
    ),
    "304": (
        ("Gopalganj Sadar", "গোপালগঞ্জ সদর"), ("Kashiani", "কাশিয়ানী"), ("Kotalipara", "কোটালীপাড়া"),
        ("Muksudpur", "মুকসুদপুর"), ("Tungipara", "টুঙ্গিপাড়া"),
    ),
    "305": (
        ("Austagram", "অষ্টগ্রাম"), ("Bajitpur", "বাজিতপুর"), ("Bhairab", "ভৈরব"),
        ("Hossainpur", "হোসেনপুর"), ("Itna", "ইটনা"), ("Karimganj", "করিমগঞ্জ"),
        ("Katiadi", "কটিয়াদী"), ("Kishoreganj Sadar", "কিশোরগঞ্জ সদর"), ("Kuliarchar", "কুলিয়ারচর"),
        ("Mithamain", "মিঠামইন"), ("Nikli", "নিকলী"), ("Pakundia", "পাকুন্দিয়া"),
        ("Tarail", "তাড়াইল"),
    ),
    "306": (
        ("Dasar", "ডাসার"), ("Kalkini", "কালকিনি"), ("Madaripur Sadar", "মাদারীপুর সদর"),
        ("Rajoir", "রাজৈর"), ("Shibchar", "শিবচর"),
    ),
    "307": (
        ("Daulatpur", "দৌলতপুর"), ("Ghior", "ঘিওর"), ("Harirampur", "হরিরামপুর"),
        ("Manikganj Sadar", "মানিকগঞ্জ সদর"), ("Saturia", "সাটুরিয়া"), ("Shivalaya", "শিবালয়"),
        ("Singair", "সিংগাইর"),
    ),
    "308": (
        ("Gazaria", "গজারিয়া"), ("Lohajang", "লৌহজং"), ("Munshiganj Sadar", "মুন্সিগঞ্জ সদর"),
        ("Sirajdikhan", "সিরাজদিখান"), ("Sreenagar", "শ্রীনগর"), ("Tongibari", "টংগিবাড়ী"),
    ),
    "309": (
        ("Araihazar", "আড়াইহাজার"), ("Bandar", "বন্দর"), ("Narayanganj Sadar", "নারায়ণগঞ্জ সদর"),
        ("Rupganj", "রূপগঞ্জ"), ("Sonargaon", "সোনারগাঁ"),
    ),
    "310": (
        ("Belabo", "বেলাবো"), ("Monohardi", "মনোহরদী"), ("Narsingdi Sadar", "নরসিংদী সদর"),
        ("Palash", "পলাশ"), ("Raipura", "রায়পুরা"), ("Shibpur", "শিবপুর"),
    ),
    "311": (
        ("Baliakandi", "বালিয়াকান্দি"), ("Goalandaghat", "গোয়ালন্দ ঘাট"), ("Kalukhali", "কালুখালী"),
        ("Pangsha", "পাংশা"), ("Rajbari Sadar", "রাজবাড়ী সদর"),
    ),
    "312": (
        ("Bhedarganj", "ভেদরগঞ্জ"), ("Damudya", "ডামুড্যা"), ("Gosairhat", "গোসাইরহাট"),
        ("Naria", "নড়িয়া"), ("Shariatpur Sadar", "শরীয়তপুর সদর"), ("Zajira", "জাজিরা"),
    ),
    "313": (
        ("Basail", "বাসাইল"), ("Bhuapur", "ভূঞাপুর"), ("Delduar", "দেলদুয়ার"),
        ("Dhanbari", "ধনবাড়ী"), ("Ghatail", "ঘাটাইল"), ("Gopalpur", "গোপালপুর"),
        ("Kalihati", "কালিহাতী"), ("Madhupur", "মধুপুর"), ("Mirzapur", "মির্জাপুর"),
        ("Nagarpur", "নাগরপুর"), ("Sakhipur", "সখিপুর"), ("Tangail Sadar", "টাঙ্গাইল সদর"),
    ),

    # ─── Khulna ──────────────────────────────────────────────────────────
    "401": (
        ("Bagerhat Sadar", "বাগেরহাট সদর"), ("Chitalmari", "চিতলমারী"), ("Fakirhat", "ফকিরহাট"),
        ("Kachua", "কচুয়া"), ("Mollahat", "মোল্লাহাট"), ("Mongla", "মোংলা"),
        ("Morrelganj", "মোরেলগঞ্জ"), ("Rampal", "রামপাল"), ("Sarankhola", "শরণখোলা"),
    ),
    "402": (
        ("Alamdanga", "আলমডাঙ্গা"), ("Chuadanga Sadar", "চুয়াডাঙ্গা সদর"), ("Damurhuda", "দামুড়হুদা"),
        ("Jibannagar", "জীবননগর"),
    ),
    "403": (
        ("Abhaynagar", "অভয়নগর"), ("Bagherpara", "বাঘারপাড়া"), ("Chaugachha", "চৌগাছা"),
        ("Jhikargachha", "ঝিকরগাছা"), ("Jashore Sadar", "যশোর সদর"), ("Keshabpur", "কেশবপুর"),
        ("Manirampur", "মণিরামপুর"), ("Sharsha", "শার্শা"),
    ),
    "404": (
        ("Harinakunda", "হরিণাকুণ্ডু"), ("Jhenaidah Sadar", "ঝিনাইদহ সদর"), ("Kaliganj", "কালীগঞ্জ"),
        ("Kotchandpur", "কোটচাঁদপুর"), ("Maheshpur", "মহেশপুর"), ("Shailkupa", "শৈলকুপা"),
    ),
    "405": (
        ("Batiaghata", "বটিয়াঘাটা"), ("Dacope", "দাকোপ"), ("Dighalia", "দিঘলিয়া"),
        ("Dumuria", "ডুমুরিয়া"), ("Koyra", "কয়রা"), ("Paikgachha", "পাইকগাছা"),
        ("Phultala", "ফুলতলা"), ("Rupsha", "রূপসা"), ("Terokhada", "তেরখাদা"),
    ),
    "406": (
        ("Bheramara", "ভেড়ামারা"), ("Daulatpur", "দৌলতপুর"), ("Khoksa", "খোকসা"),
        ("Kumarkhali", "কুমারখালী"), ("Kushtia Sadar", "কুষ্টিয়া সদর"), ("Mirpur", "মিরপুর"),
    ),
    "407": (
        ("Magura Sadar", "মাগুরা সদর"), ("Mohammadpur", "মহম্মদপুর"), ("Shalikha", "শালিখা"),
        ("Sreepur", "শ্রীপুর"),
    ),
    "408": (
        ("Gangni", "গাংনী"), ("Meherpur Sadar", "মেহেরপুর সদর"), ("Mujibnagar", "মুজিবনগর"),
    ),
    "409": (
        ("Kalia", "কালিয়া"), ("Lohagara", "লোহাগড়া"), ("Narail Sadar", "নড়াইল সদর"),
    ),
    "410": (
        ("Assasuni", "আশাশুনি"), ("Debhata", "দেবহাটা"), ("Kalaroa", "কলারোয়া"),
        ("Kaliganj", "কালীগঞ্জ"), ("Satkhira Sadar", "সাতক্ষীরা সদর"), ("Shyamnagar", "শ্যামনগর"),
        ("Tala", "তালা"),
    ),

    # ─── Mymensingh ──────────────────────────────────────────────────────
    "501": (
        ("Bakshiganj", "বকশীগঞ্জ"), ("Dewanganj", "দেওয়ানগঞ্জ"), ("Islampur", "ইসলামপুর"),
        ("Jamalpur Sadar", "জামালপুর সদর"), ("Madarganj", "মাদারগঞ্জ"), ("Melandaha", "মেলান্দহ"),
        ("Sarishabari", "সরিষাবাড়ী"),
    ),
    "502": (
        ("Bhaluka", "ভালুকা"), ("Dhobaura", "ধোবাউড়া"), ("Fulbaria", "ফুলবাড়িয়া"),
        ("Gaffargaon", "গফরগাঁও"), ("Gauripur", "গৌরীপুর"), ("Haluaghat", "হালুয়াঘাট"),
        ("Ishwarganj", "ঈশ্বরগঞ্জ"), ("Muktagachha", "মুক্তাগাছা"), ("Mymensingh Sadar", "ময়মনসিংহ সদর"),
        ("Nandail", "নান্দাইল"), ("Phulpur", "ফুলপুর"), ("Tarakanda", "তারাকান্দা"),
        ("Trishal", "ত্রিশাল"),
    ),
    "503": (
        ("Atpara", "আটপাড়া"), ("Barhatta", "বারহাট্টা"), ("Durgapur", "দুর্গাপুর"),
        ("Kalmakanda", "কলমাকান্দা"), ("Kendua", "কেন্দুয়া"), ("Khaliajuri", "খালিয়াজুরী"),
        ("Madan", "মদন"), ("Mohanganj", "মোহনগঞ্জ"), ("Netrokona Sadar", "নেত্রকোনা সদর"),
        ("Purbadhala", "পূর্বধলা"),
    ),
    "504": (
        ("Jhenaigati", "ঝিনাইগাতী"), ("Nakla", "নকলা"), ("Nalitabari", "নালিতাবাড়ী"),
        ("Sherpur Sadar", "শেরপুর সদর"), ("Sreebardi", "শ্রীবরদী"),
    ),

    # ─── Rajshahi ────────────────────────────────────────────────────────
    "601": (
        ("Adamdighi", "আদমদীঘি"), ("Bogura Sadar", "বগুড়া সদর"), ("Dhunat", "ধুনট"),
        ("Dhupchanchia", "দুপচাঁচিয়া"), ("Gabtali", "গাবতলী"), ("Kahaloo", "কাহালু"),
        ("Nandigram", "নন্দীগ্রাম"), ("Sariakandi", "সারিয়াকান্দি"), ("Shajahanpur", "শাজাহানপুর"),
        ("Sherpur", "শেরপুর"), ("Shibganj", "শিবগঞ্জ"), ("Sonatala", "সোনাতলা"),
    ),
    "602": (
        ("Bholahat", "ভোলাহাট"), ("Chapainawabganj Sadar", "চাঁপাইনবাবগঞ্জ সদর"), ("Gomastapur", "গোমস্তাপুর"),
        ("Nachole", "নাচোল"), ("Shibganj", "শিবগঞ্জ"),
    ),
    "603": (
        ("Akkelpur", "আক্কেলপুর"), ("Joypurhat Sadar", "জয়পুরহাট সদর"), ("Kalai", "কালাই"),
        ("Khetlal", "ক্ষেতলাল"), ("Panchbibi", "পাঁচবিবি"),
    ),
    "604": (
        ("Atrai", "আত্রাই"), ("Badalgachhi", "বদলগাছী"), ("Dhamoirhat", "ধামইরহাট"),
        ("Manda", "মান্দা"), ("Mohadevpur", "মহাদেবপুর"), ("Naogaon Sadar", "নওগাঁ সদর"),
        ("Niamatpur", "নিয়ামতপুর"), ("Patnitala", "পত্নীতলা"), ("Porsha", "পোরশা"),
        ("Raninagar", "রাণীনগর"), ("Sapahar", "সাপাহার"),
    ),
    "605": (
        ("Bagatipara", "বাগাতিপাড়া"), ("Baraigram", "বড়াইগ্রাম"), ("Gurudaspur", "গুরুদাসপুর"),
        ("Lalpur", "লালপুর"), ("Naldanga", "নলডাঙ্গা"), ("Natore Sadar", "নাটোর সদর"),
        ("Singra", "সিংড়া"),
    ),
    "606": (
        ("Atgharia", "আটঘরিয়া"), ("Bera", "বেড়া"), ("Bhangura", "ভাঙ্গুড়া"),
        ("Chatmohar", "চাটমোহর"), ("Faridpur", "ফরিদপুর"), ("Ishwardi", "ঈশ্বরদী"),
        ("Pabna Sadar", "পাবনা সদর"), ("Santhia", "সাঁথিয়া"), ("Sujanagar", "সুজানগর"),
    ),
    "607": (
        ("Bagha", "বাঘা"), ("Bagmara", "বাগমারা"), ("Charghat", "চারঘাট"),
        ("Durgapur", "দুর্গাপুর"), ("Godagari", "গোদাগাড়ী"), ("Mohanpur", "মোহনপুর"),
        ("Paba", "পবা"), ("Puthia", "পুঠিয়া"), ("Rajshahi Sadar", "রাজশাহী সদর"),
        ("Tanore", "তানোর"),
    ),
    "608": (
        ("Belkuchi", "বেলকুচি"), ("Chauhali", "চৌহালি"), ("Kamarkhanda", "কামারখন্দ"),
        ("Kazipur", "কাজীপুর"), ("Raiganj", "রায়গঞ্জ"), ("Shahjadpur", "শাহজাদপুর"),
        ("Sirajganj Sadar", "সিরাজগঞ্জ সদর"), ("Tarash", "তাড়াশ"), ("Ullahpara", "উল্লাপাড়া"),
    ),

    # ─── Rangpur ─────────────────────────────────────────────────────────
    "701": (
        ("Birampur", "বিরামপুর"), ("Birganj", "বীরগঞ্জ"), ("Biral", "বিরল"),
        ("Bochaganj", "বোচাগঞ্জ"), ("Chirirbandar", "চিরিরবন্দর"), ("Dinajpur Sadar", "দিনাজপুর সদর"),
        ("Fulbari", "ফুলবাড়ী"), ("Ghoraghat", "ঘোড়াঘাট"), ("Hakimpur", "হাকিমপুর"),
        ("Kaharole", "কাহারোল"), ("Khansama", "খানসামা"), ("Nawabganj", "নবাবগঞ্জ"),
        ("Parbatipur", "পার্বতীপুর"),
    ),
    "702": (
        ("Fulchhari", "ফুলছড়ি"), ("Gaibandha Sadar", "গাইবান্ধা সদর"), ("Gobindaganj", "গোবিন্দগঞ্জ"),
        ("Palashbari", "পলাশবাড়ী"), ("Sadullapur", "সাদুল্লাপুর"), ("Saghata", "সাঘাটা"),
        ("Sundarganj", "সুন্দরগঞ্জ"),
    ),
    "703": (
        ("Bhurungamari", "ভুরুঙ্গামারী"), ("Char Rajibpur", "চর রাজিবপুর"), ("Chilmari", "চিলমারী"),
        ("Kurigram Sadar", "কুড়িগ্রাম সদর"), ("Nageshwari", "নাগেশ্বরী"), ("Phulbari", "ফুলবাড়ী"),
        ("Rajarhat", "রাজারহাট"), ("Raomari", "রৌমারী"), ("Ulipur", "উলিপুর"),
    ),
    "704": (
        ("Aditmari", "আদিতমারী"), ("Hatibandha", "হাতীবান্ধা"), ("Kaliganj", "কালীগঞ্জ"),
        ("Lalmonirhat Sadar", "লালমনিরহাট সদর"), ("Patgram", "পাটগ্রাম"),
    ),
    "705": (
        ("Dimla", "ডিমলা"), ("Domar", "ডোমার"), ("Jaldhaka", "জলঢাকা"),
        ("Kishoreganj", "কিশোরগঞ্জ"), ("Nilphamari Sadar", "নীলফামারী সদর"), ("Saidpur", "সৈয়দপুর"),
    ),
    "706": (
        ("Atwari", "আটোয়ারী"), ("Boda", "বোদা"), ("Debiganj", "দেবীগঞ্জ"),
        ("Panchagarh Sadar", "পঞ্চগড় সদর"), ("Tetulia", "তেঁতুলিয়া"),
    ),
    "707": (
        ("Badarganj", "বদরগঞ্জ"), ("Gangachara", "গংগাচড়া"), ("Kaunia", "কাউনিয়া"),
        ("Mithapukur", "মিঠাপুকুর"), ("Pirgachha", "পীরগাছা"), ("Pirganj", "পীরগঞ্জ"),
        ("Rangpur Sadar", "রংপুর সদর"), ("Taraganj", "তারাগঞ্জ"),
    ),
    "708": (
        ("Baliadangi", "বালিয়াডাঙ্গী"), ("Haripur", "হরিপুর"), ("Pirganj", "পীরগঞ্জ"),
        ("Ranisankail", "রাণীশংকৈল"), ("Thakurgaon Sadar", "ঠাকুরগাঁও সদর"),
    ),

    # ─── Sylhet ──────────────────────────────────────────────────────────
    "801": (
        ("Ajmiriganj", "আজমিরীগঞ্জ"), ("Bahubal", "বাহুবল"), ("Baniachong", "বানিয়াচং"),
        ("Chunarughat", "চুনারুঘাট"), ("Habiganj Sadar", "হবিগঞ্জ সদর"), ("Lakhai", "লাখাই"),
        ("Madhabpur", "মাধবপুর"), ("Nabiganj", "নবীগঞ্জ"), ("Shayestaganj", "শায়েস্তাগঞ্জ"),
    ),
    "802": (
        ("Barlekha", "বড়লেখা"), ("Juri", "জুড়ী"), ("Kamalganj", "কমলগঞ্জ"),
        ("Kulaura", "কুলাউড়া"), ("Moulvibazar Sadar", "মৌলভীবাজার সদর"), ("Rajnagar", "রাজনগর"),
        ("Sreemangal", "শ্রীমঙ্গল"),
    ),
    "803": (
        ("Bishwamvarpur", "বিশ্বম্ভরপুর"), ("Chhatak", "ছাতক"), ("Derai", "দিরাই"),
        ("Dharmapasha", "ধর্মপাশা"), ("Dowarabazar", "দোয়ারাবাজার"), ("Jagannathpur", "জগন্নাথপুর"),
        ("Jamalganj", "জামালগঞ্জ"), ("Madhyanagar", "মধ্যনগর"), ("Shalla", "শাল্লা"),
        ("Shantiganj", "শান্তিগঞ্জ"), ("Sunamganj Sadar", "সুনামগঞ্জ সদর"), ("Tahirpur", "তাহিরপুর"),
    ),
    "804": (
        ("Balaganj", "বালাগঞ্জ"), ("Beanibazar", "বিয়ানীবাজার"), ("Bishwanath", "বিশ্বনাথ"),
        ("Companiganj", "কোম্পানীগঞ্জ"), ("Dakshin Surma", "দক্ষিণ সুরমা"), ("Fenchuganj", "ফেঞ্চুগঞ্জ"),
        ("Golapganj", "গোলাপগঞ্জ"), ("Gowainghat", "গোয়াইনঘাট"), ("Jaintiapur", "জৈন্তাপুর"),
        ("Kanaighat", "কানাইঘাট"), ("Osmani Nagar", "ওসমানী নগর"), ("Sylhet Sadar", "সিলেট সদর"),
        ("Zakiganj", "জকিগঞ্জ"),
    ),
}


def upazila_id(district_id: str, index: int) -> str:
    """Return the upazila id for the 1-based position inside its district."""
    return f"{district_id}{index:02d}"
