"""
Static Hyderabad Metro topology.

Corridor order is the physical station sequence of each line. Interchanges are
declared explicitly; a station name shared by two corridors is not connected
unless it appears here.
"""

from src.network.schemas import InterchangeDeclaration, StationSeed

RED_LINE = "Red Line"
BLUE_LINE = "Blue Line"
GREEN_LINE = "Green Line"

INTERCHANGE_MINUTES = 2

LINE_COLORS = {
    RED_LINE: "#E41E26",
    BLUE_LINE: "#0078C1",
    GREEN_LINE: "#008B45",
}

CORRIDORS = {
    RED_LINE: [
        StationSeed(name="Miyapur", lat=17.4948, lon=78.3973),
        StationSeed(name="JNTU College", lat=17.4895, lon=78.4029),
        StationSeed(name="KPHB Colony", lat=17.4842, lon=78.4087),
        StationSeed(name="Kukatpally", lat=17.4789, lon=78.4144),
        StationSeed(name="Balanagar", lat=17.4736, lon=78.4201),
        StationSeed(name="Moosapet", lat=17.4684, lon=78.4258),
        StationSeed(name="Bharat Nagar", lat=17.4631, lon=78.4315),
        StationSeed(name="Erragadda", lat=17.4578, lon=78.4371),
        StationSeed(name="ESI Hospital", lat=17.4525, lon=78.4428),
        StationSeed(name="SR Nagar", lat=17.4472, lon=78.4485),
        StationSeed(name="Ameerpet", lat=17.43782, lon=78.446865),
        StationSeed(name="Punjagutta", lat=17.4366, lon=78.4599),
        StationSeed(name="Irrum Manzil", lat=17.4314, lon=78.4656),
        StationSeed(name="Khairatabad", lat=17.4261, lon=78.4713),
        StationSeed(name="Lakdi-ka-pul", lat=17.4208, lon=78.4770),
        StationSeed(name="Assembly", lat=17.4155, lon=78.4827),
        StationSeed(name="Nampally", lat=17.4102, lon=78.4884),
        StationSeed(name="Gandhi Bhavan", lat=17.4050, lon=78.4941),
        StationSeed(name="Osmania Medical College", lat=17.3997, lon=78.4998),
        StationSeed(name="MG Bus Station", lat=17.38594, lon=78.48125),
        StationSeed(name="Malakpet", lat=17.3891, lon=78.5111),
        StationSeed(name="New Market", lat=17.3838, lon=78.5168),
        StationSeed(name="Musarambagh", lat=17.3785, lon=78.5225),
        StationSeed(name="Dilsukhnagar", lat=17.3733, lon=78.5282),
        StationSeed(name="Chaitanyapuri", lat=17.3680, lon=78.5339),
        StationSeed(name="Victoria Memorial", lat=17.3627, lon=78.5396),
        StationSeed(name="LB Nagar", lat=17.3540, lon=78.5451),
    ],
    BLUE_LINE: [
        StationSeed(name="Nagole", lat=17.3892, lon=78.5504),
        StationSeed(name="Uppal", lat=17.4030, lon=78.5590),
        StationSeed(name="Survey of India", lat=17.4020, lon=78.5475),
        StationSeed(name="NGRI", lat=17.4027, lon=78.5395),
        StationSeed(name="Habsiguda", lat=17.4073, lon=78.5330),
        StationSeed(name="Tarnaka", lat=17.4222, lon=78.5325),
        StationSeed(name="Mettuguda", lat=17.4339, lon=78.5205),
        StationSeed(name="Secunderabad East", lat=17.4390, lon=78.5076),
        StationSeed(name="Parade Ground", lat=17.4466, lon=78.5013),
        StationSeed(name="Paradise", lat=17.4442, lon=78.4872),
        StationSeed(name="Rasoolpura", lat=17.4406, lon=78.4783),
        StationSeed(name="Prakash Nagar", lat=17.4365, lon=78.4691),
        StationSeed(name="Begumpet", lat=17.4349, lon=78.4597),
        StationSeed(name="Ameerpet", lat=17.43782, lon=78.446865),
        StationSeed(name="Madhura Nagar", lat=17.4371, lon=78.4370),
        StationSeed(name="Yousufguda", lat=17.4333, lon=78.4300),
        StationSeed(name="Jubilee Hills Check Post", lat=17.4350, lon=78.4209),
        StationSeed(name="Peddamma Gudi", lat=17.4374, lon=78.4140),
        StationSeed(name="Madhapur", lat=17.4415, lon=78.4029),
        StationSeed(name="Durgam Cheruvu", lat=17.4426, lon=78.3958),
        StationSeed(name="Hitec City", lat=17.4455, lon=78.3877),
        StationSeed(name="Raidurg", lat=17.4408, lon=78.3816),
    ],
    GREEN_LINE: [
        StationSeed(name="JBS Parade Ground", lat=17.4466, lon=78.5013),
        StationSeed(name="Secunderabad West", lat=17.4451, lon=78.4988),
        StationSeed(name="Gandhi Hospital", lat=17.4380, lon=78.4937),
        StationSeed(name="Musheerabad", lat=17.4303, lon=78.4921),
        StationSeed(name="RTC X Roads", lat=17.4213, lon=78.4896),
        StationSeed(name="Chikkadpally", lat=17.4130, lon=78.4882),
        StationSeed(name="Narayanguda", lat=17.4049, lon=78.4871),
        StationSeed(name="Sultan Bazar", lat=17.3965, lon=78.4852),
        StationSeed(name="MG Bus Station", lat=17.38594, lon=78.48125),
    ],
}

INTERCHANGES = [
    InterchangeDeclaration(
        station_a="Ameerpet", line_a=RED_LINE,
        station_b="Ameerpet", line_b=BLUE_LINE,
        minutes=INTERCHANGE_MINUTES
    ),
    InterchangeDeclaration(
        station_a="MG Bus Station", line_a=RED_LINE,
        station_b="MG Bus Station", line_b=GREEN_LINE,
        minutes=INTERCHANGE_MINUTES
    ),
    # Walkway between the Blue Line platform and the JBS Green Line terminus
    InterchangeDeclaration(
        station_a="Parade Ground", line_a=BLUE_LINE,
        station_b="JBS Parade Ground", line_b=GREEN_LINE,
        minutes=INTERCHANGE_MINUTES
    ),
]
