"""Static city table backing the demo client."""

from app.models.city import City

CITIES_DATA = {
    2643743: City(
        city_id=2643743,
        city_name="London",
        state_code="ENG",
        country_code="GB",
        country_full="United Kingdom",
        lat=51.50853,
        lon=-0.12574,
    ),
    2988507: City(
        city_id=2988507,
        city_name="Paris",
        state_code="11",
        country_code="FR",
        country_full="France",
        lat=48.85341,
        lon=2.3488,
    ),
    5128581: City(
        city_id=5128581,
        city_name="New York City",
        state_code="NY",
        country_code="US",
        country_full="United States",
        lat=40.71427,
        lon=-74.00597,
    ),
    1850147: City(
        city_id=1850147,
        city_name="Tokyo",
        state_code="40",
        country_code="JP",
        country_full="Japan",
        lat=35.6895,
        lon=139.69171,
    ),
    2147714: City(
        city_id=2147714,
        city_name="Sydney",
        state_code="NSW",
        country_code="AU",
        country_full="Australia",
        lat=-33.86785,
        lon=151.20732,
    ),
    1581130: City(
        city_id=1581130,
        city_name="Hanoi",
        state_code="44",
        country_code="VN",
        country_full="Vietnam",
        lat=21.0245,
        lon=105.84117,
    ),
}
