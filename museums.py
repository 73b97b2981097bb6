# --- MUSEUM DIRECTORY ---
# Static directory served by /api/museums. Museum ids are the integers users
# store in their wishlist, visited log and reviews.

MUSEUMS = [
    {
        'id': 1,
        'key': 'national_museum_new_delhi',
        'name': 'National Museum',
        'location': 'New Delhi',
        'state': 'Delhi',
        'description': 'India\'s largest museum, spanning five millennia of art from the Indus Valley to the Mughal court.',
        'image': 'https://example.com/national_museum.jpg',
        'visitors_per_year': 800000,
        'weekday_charge': 20,
        'weekend_charge': 20,
        'hours': '10:00 AM - 6:00 PM (Closed on Monday)',
        'top_exhibits': [
            {'title': 'Dancing Girl of Mohenjo-daro', 'desc': 'Bronze statuette from the Indus Valley Civilization, about 4,500 years old.', 'img': 'https://example.com/nm_dancing_girl.jpg'},
            {'title': 'Nataraja Chola Bronze', 'desc': '12th-century bronze of Shiva as the cosmic dancer.', 'img': 'https://example.com/nm_nataraja.jpg'},
        ],
    },
    {
        'id': 2,
        'key': 'indian_museum_kolkata',
        'name': 'Indian Museum',
        'location': 'Kolkata',
        'state': 'West Bengal',
        'description': 'The oldest museum in India, founded in 1814, with archaeology, art and natural history galleries.',
        'image': 'https://example.com/indian_museum.jpg',
        'visitors_per_year': 650000,
        'weekday_charge': 50,
        'weekend_charge': 50,
        'hours': '10:00 AM - 5:00 PM (Closed on Monday)',
        'top_exhibits': [
            {'title': 'Bharhut Stupa Railings', 'desc': 'Stone railings and gateways from the 2nd-century BCE stupa at Bharhut.', 'img': 'https://example.com/im_bharhut.jpg'},
            {'title': 'Egyptian Mummy', 'desc': 'Mummy from the Ptolemaic period.', 'img': 'https://example.com/im_mummy.jpg'},
        ],
    },
    {
        'id': 3,
        'key': 'csmvs_mumbai',
        'name': 'Chhatrapati Shivaji Maharaj Vastu Sangrahalaya',
        'location': 'Mumbai',
        'state': 'Maharashtra',
        'description': 'Indo-Saracenic landmark housing sculpture, miniature painting and decorative arts.',
        'image': 'https://example.com/csmvs.jpg',
        'visitors_per_year': 1200000,
        'weekday_charge': 100,
        'weekend_charge': 120,
        'hours': '10:15 AM - 6:00 PM (Open 7 days)',
        'top_exhibits': [
            {'title': 'Indus Valley Artefacts', 'desc': 'Terracotta figurines and seals from around 3000 BC.', 'img': 'https://example.com/csmvs_indus.jpg'},
            {'title': 'Mughal Jade Collection', 'desc': 'Carved jade objects from the Mughal period.', 'img': 'https://example.com/csmvs_jade.jpg'},
        ],
    },
    {
        'id': 4,
        'key': 'salar_jung_museum_hyderabad',
        'name': 'Salar Jung Museum',
        'location': 'Hyderabad',
        'state': 'Telangana',
        'description': 'One of the largest one-man collections in the world, gathered by the Salar Jung family.',
        'image': 'https://example.com/salar_jung.jpg',
        'visitors_per_year': 1500000,
        'weekday_charge': 50,
        'weekend_charge': 50,
        'hours': '10:00 AM - 6:00 PM (Closed on Friday)',
        'top_exhibits': [
            {'title': 'The Veiled Rebecca', 'desc': 'Marble sculpture by G.B. Benzoni known for its carved veil.', 'img': 'https://example.com/sjm_rebecca.jpg'},
            {'title': 'Musical Clock', 'desc': '19th-century British clock whose figure strikes the gong every hour.', 'img': 'https://example.com/sjm_clock.jpg'},
        ],
    },
    {
        'id': 5,
        'key': 'bihar_museum_patna',
        'name': 'Bihar Museum',
        'location': 'Patna',
        'state': 'Bihar',
        'description': 'Modern museum tracing the history of Bihar from the Mauryan empire onwards.',
        'image': 'https://example.com/bihar_museum.jpg',
        'visitors_per_year': 400000,
        'weekday_charge': 100,
        'weekend_charge': 100,
        'hours': '10:00 AM - 5:00 PM (Closed on Monday)',
        'top_exhibits': [
            {'title': 'Didarganj Yakshi', 'desc': 'Polished sandstone sculpture from the Mauryan period.', 'img': 'https://example.com/bm_yakshi.jpg'},
            {'title': 'Patna School of Painting', 'desc': 'Miniature painting in the style of the Patna region.', 'img': 'https://example.com/bm_patna.jpg'},
        ],
    },
    {
        'id': 6,
        'key': 'albert_hall_museum_jaipur',
        'name': 'Albert Hall Museum',
        'location': 'Jaipur',
        'state': 'Rajasthan',
        'description': 'The oldest museum of Rajasthan, set in a 19th-century Indo-Saracenic building.',
        'image': 'https://example.com/albert_hall.jpg',
        'visitors_per_year': 950000,
        'weekday_charge': 50,
        'weekend_charge': 70,
        'hours': '9:00 AM - 5:00 PM (Open 7 days)',
        'top_exhibits': [
            {'title': 'Persian Carpets', 'desc': 'Persian and Mughal carpets, including a hunting-scene carpet.', 'img': 'https://example.com/ahm_carpet.jpg'},
            {'title': 'Pottery and Ceramics', 'desc': 'Traditional Rajasthani blue pottery among other wares.', 'img': 'https://example.com/ahm_pottery.jpg'},
        ],
    },
    {
        'id': 7,
        'key': 'calico_museum_of_textiles',
        'name': 'Calico Museum of Textiles',
        'location': 'Ahmedabad',
        'state': 'Gujarat',
        'description': 'Premier textile museum with court fabrics, embroideries and religious cloths.',
        'image': 'https://example.com/calico.jpg',
        'visitors_per_year': 50000,
        'weekday_charge': 0,
        'weekend_charge': 0,
        'hours': '10:30 AM - 12:30 PM (Closed on Wednesday - Timed Entry)',
        'top_exhibits': [
            {'title': 'Court Textiles', 'desc': 'Fabrics worn by Mughal and provincial rulers.', 'img': 'https://example.com/cmt_court.jpg'},
            {'title': 'Kashmiri Shawls', 'desc': 'Pashmina and Shahtoosh shawls with intricate weaving.', 'img': 'https://example.com/cmt_shawls.jpg'},
        ],
    },
    {
        'id': 8,
        'key': 'national_rail_museum_new_delhi',
        'name': 'National Rail Museum',
        'location': 'New Delhi',
        'state': 'Delhi',
        'description': 'Indoor and outdoor galleries covering 160 years of Indian railway heritage.',
        'image': 'https://example.com/rail_museum.jpg',
        'visitors_per_year': 700000,
        'weekday_charge': 50,
        'weekend_charge': 100,
        'hours': '10:00 AM - 5:00 PM (Closed on Monday)',
        'top_exhibits': [
            {'title': 'Fairy Queen Steam Locomotive', 'desc': 'Operational steam locomotive built in 1855.', 'img': 'https://example.com/nrm_fairy_queen.jpg'},
            {'title': 'Patiala State Monorail', 'desc': 'Monorail that ran in the princely state of Patiala.', 'img': 'https://example.com/nrm_monorail.jpg'},
        ],
    },
    {
        'id': 9,
        'key': 'government_museum_chennai',
        'name': 'Government Museum',
        'location': 'Chennai',
        'state': 'Tamil Nadu',
        'description': 'Egmore museum complex known for its South Indian bronzes and Amaravati marbles.',
        'image': 'https://example.com/govt_museum_chennai.jpg',
        'visitors_per_year': 750000,
        'weekday_charge': 20,
        'weekend_charge': 20,
        'hours': '9:30 AM - 5:00 PM (Closed on Friday)',
        'top_exhibits': [
            {'title': 'Bronze Gallery', 'desc': 'Chola and Pallava bronze sculpture.', 'img': 'https://example.com/gm_bronze.jpg'},
            {'title': 'Numismatics Gallery', 'desc': 'Coins tracing the history of South India.', 'img': 'https://example.com/gm_coins.jpg'},
        ],
    },
    {
        'id': 10,
        'key': 'national_gallery_of_modern_art_new_delhi',
        'name': 'National Gallery of Modern Art (NGMA)',
        'location': 'New Delhi',
        'state': 'Delhi',
        'description': 'National collection of modern and contemporary Indian art in Jaipur House.',
        'image': 'https://example.com/ngma.jpg',
        'visitors_per_year': 150000,
        'weekday_charge': 20,
        'weekend_charge': 20,
        'hours': '10:00 AM - 5:00 PM (Closed on Monday)',
        'top_exhibits': [
            {'title': 'Amrita Sher-gil Collection', 'desc': 'Key works by the pioneer of modern Indian art.', 'img': 'https://example.com/ngma_amrita.jpg'},
            {'title': 'Works by Rabindranath Tagore', 'desc': 'Paintings and sketches by the Nobel laureate.', 'img': 'https://example.com/ngma_tagore.jpg'},
        ],
    },
    {
        'id': 11,
        'key': 'shankar_international_dolls_museum',
        'name': "Shankar's International Dolls Museum",
        'location': 'New Delhi',
        'state': 'Delhi',
        'description': 'Dolls in national costume from more than 85 countries.',
        'image': 'https://example.com/dolls_museum.jpg',
        'visitors_per_year': 400000,
        'weekday_charge': 20,
        'weekend_charge': 20,
        'hours': '10:00 AM - 5:30 PM (Closed on Monday)',
        'top_exhibits': [
            {'title': 'Indian Regional Dolls', 'desc': 'Costumes of India\'s states in doll form.', 'img': 'https://example.com/sidm_regional.jpg'},
            {'title': 'Japanese Kabuki Dolls', 'desc': 'Traditional Kabuki figures.', 'img': 'https://example.com/sidm_kabuki.jpg'},
        ],
    },
    {
        'id': 12,
        'key': 'virasat_e_khalsa',
        'name': 'Virasat-e-Khalsa',
        'location': 'Anandpur Sahib',
        'state': 'Punjab',
        'description': 'Heritage complex narrating the history of Punjab and the Sikh faith.',
        'image': 'https://example.com/virasat_e_khalsa.jpg',
        'visitors_per_year': 1000000,
        'weekday_charge': 0,
        'weekend_charge': 0,
        'hours': '10:00 AM - 4:30 PM (Closed on Monday)',
        'top_exhibits': [
            {'title': 'Formation of Khalsa Panth', 'desc': 'Multimedia galleries on the events of 1699.', 'img': 'https://example.com/vek_khalsa.jpg'},
            {'title': 'Historical Manuscripts', 'desc': 'Manuscripts and documents related to the Gurus.', 'img': 'https://example.com/vek_manuscripts.jpg'},
        ],
    },
    {
        'id': 13,
        'key': 'napier_museum_thiruvananthapuram',
        'name': 'Napier Museum',
        'location': 'Thiruvananthapuram',
        'state': 'Kerala',
        'description': 'Art and natural history museum in a Kerala-style Indo-Saracenic building.',
        'image': 'https://example.com/napier.jpg',
        'visitors_per_year': 300000,
        'weekday_charge': 20,
        'weekend_charge': 20,
        'hours': '10:00 AM - 5:00 PM (Closed on Monday)',
        'top_exhibits': [
            {'title': 'Ivory Carvings', 'desc': 'Kerala ivory craftsmanship.', 'img': 'https://example.com/napier_ivory.jpg'},
            {'title': 'Temple Chariots', 'desc': 'Carved wooden models of temple chariots.', 'img': 'https://example.com/napier_chariots.jpg'},
        ],
    },
    {
        'id': 14,
        'key': 'govt_museum_art_gallery_chandigarh',
        'name': 'Government Museum & Art Gallery',
        'location': 'Chandigarh',
        'state': 'Chandigarh',
        'description': 'Le Corbusier-designed museum with Gandharan sculpture and Pahari painting.',
        'image': 'https://example.com/chandigarh_museum.jpg',
        'visitors_per_year': 180000,
        'weekday_charge': 10,
        'weekend_charge': 10,
        'hours': '10:00 AM - 4:30 PM (Closed on Monday)',
        'top_exhibits': [
            {'title': 'Gandharan Sculptures', 'desc': 'Greco-Buddhist sculpture of the Gandhara school.', 'img': 'https://example.com/gmag_gandhara.jpg'},
            {'title': 'Pahari Miniature Paintings', 'desc': 'Miniatures from the hill kingdoms of Punjab and Himachal.', 'img': 'https://example.com/gmag_pahari.jpg'},
        ],
    },
    {
        'id': 15,
        'key': 'dogra_art_museum_jammu',
        'name': 'Dogra Art Museum',
        'location': 'Jammu',
        'state': 'Jammu and Kashmir',
        'description': 'Collection of Basohli paintings, terracottas and manuscripts in the Mubarak Mandi palace.',
        'image': 'https://example.com/dogra_museum.jpg',
        'visitors_per_year': 120000,
        'weekday_charge': 10,
        'weekend_charge': 10,
        'hours': '10:00 AM - 5:00 PM (Closed on Monday)',
        'top_exhibits': [
            {'title': 'Basohli Paintings', 'desc': 'Miniatures in the bold Basohli style.', 'img': 'https://example.com/dam_basohli.jpg'},
        ],
    },
    {
        'id': 16,
        'key': 'visvesvaraya_industrial_and_technological_museum',
        'name': 'Visvesvaraya Industrial and Technological Museum',
        'location': 'Bengaluru',
        'state': 'Karnataka',
        'description': 'Science and technology museum with hands-on galleries on engines, electricity and space.',
        'image': 'https://example.com/vitm.jpg',
        'visitors_per_year': 1100000,
        'weekday_charge': 70,
        'weekend_charge': 70,
        'hours': '9:30 AM - 6:00 PM (Open 7 days)',
        'top_exhibits': [
            {'title': 'Engine Hall', 'desc': 'Working models of steam and internal combustion engines.', 'img': 'https://example.com/vitm_engines.jpg'},
        ],
    },
]
# --- END MUSEUM DIRECTORY ---


def list_museums(search='', state=''):
    """Museums matching a free-text search and an optional state, sorted by name."""
    search = (search or '').strip().lower()
    results = []
    for museum in MUSEUMS:
        if state and museum['state'] != state:
            continue
        if search and not (
            search in museum['name'].lower()
            or search in museum['location'].lower()
            or search in museum['description'].lower()
        ):
            continue
        results.append(dict(museum))

    results.sort(key=lambda m: m['name'])
    return results


def get_museum(museum_id):
    for museum in MUSEUMS:
        if museum['id'] == museum_id:
            return dict(museum)
    return None


def list_states():
    return sorted({m['state'] for m in MUSEUMS})
