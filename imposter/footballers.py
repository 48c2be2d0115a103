"""Curated footballer pools and the selectable clubs."""
from __future__ import annotations

from typing import List

from .schemas import ClubInfo, FootballPlayer


def _fp(name: str, team: str, nationality: str, position: str, hint: str) -> FootballPlayer:
    return FootballPlayer(name=name, team=team, nationality=nationality, position=position, hint=hint)


_BADGES = "https://r2.thesportsdb.com/images/media/team/badge/"

CLUBS: List[ClubInfo] = [
    ClubInfo(id="133613", name="Manchester City", short_name="Man City", badge=_BADGES + "vwpvry1467462651.png"),
    ClubInfo(id="133738", name="Real Madrid", short_name="Real Madrid", badge=_BADGES + "vwvwrw1473502969.png"),
    ClubInfo(id="133739", name="Barcelona", short_name="Barcelona", badge=_BADGES + "wq9sir1639406443.png"),
    ClubInfo(id="133632", name="Bayern Munich", short_name="Bayern", badge=_BADGES + "01ogkh1716960412.png"),
    ClubInfo(id="133602", name="Liverpool", short_name="Liverpool", badge=_BADGES + "kfaher1737969724.png"),
    ClubInfo(id="133604", name="Arsenal", short_name="Arsenal", badge=_BADGES + "uyhbfe1612467038.png"),
    ClubInfo(id="133610", name="Chelsea", short_name="Chelsea", badge=_BADGES + "yvwvtu1448813215.png"),
    ClubInfo(id="133612", name="Manchester United", short_name="Man Utd", badge=_BADGES + "xzqdr11517660252.png"),
    ClubInfo(id="133714", name="Paris Saint-Germain", short_name="PSG", badge=_BADGES + "rwqrrq1473504808.png"),
    ClubInfo(id="133676", name="Juventus", short_name="Juventus", badge=_BADGES + "uxf0gr1742983727.png"),
    ClubInfo(id="133670", name="Inter Milan", short_name="Inter", badge=_BADGES + "ryhu6d1617113103.png"),
    ClubInfo(id="133671", name="AC Milan", short_name="AC Milan", badge=_BADGES + "wvspur1448806617.png"),
    ClubInfo(id="133636", name="Borussia Dortmund", short_name="Dortmund", badge=_BADGES + "tqo8ge1716960353.png"),
    ClubInfo(id="133703", name="Atletico Madrid", short_name="Atletico", badge=_BADGES + "0ulh3q1719984315.png"),
    ClubInfo(id="133616", name="Tottenham", short_name="Spurs", badge=_BADGES + "dfyfhl1604094109.png"),
]

CLUBS_BY_ID = {club.id: club for club in CLUBS}

CURRENT_STARS: List[FootballPlayer] = [
    _fp("Lionel Messi", "Inter Miami", "Argentina", "Forward", "The GOAT debate"),
    _fp("Cristiano Ronaldo", "Al-Nassr", "Portugal", "Forward", "SIUUU"),
    _fp("Kylian Mbappé", "Real Madrid", "France", "Forward", "Teenage World Cup winner"),
    _fp("Erling Haaland", "Manchester City", "Norway", "Striker", "The Viking"),
    _fp("Vinicius Jr.", "Real Madrid", "Brazil", "Winger", "Samba magic"),
    _fp("Jude Bellingham", "Real Madrid", "England", "Midfielder", "Birmingham to Madrid"),
    _fp("Kevin De Bruyne", "Manchester City", "Belgium", "Midfielder", "Assist king"),
    _fp("Mohamed Salah", "Liverpool", "Egypt", "Forward", "Egyptian King"),
    _fp("Robert Lewandowski", "Barcelona", "Poland", "Striker", "5 goals in 9 minutes"),
    _fp("Neymar Jr.", "Al-Hilal", "Brazil", "Forward", "Rainbow flicks"),
    _fp("Luka Modrić", "Real Madrid", "Croatia", "Midfielder", "2018 Ballon d'Or"),
    _fp("Harry Kane", "Bayern Munich", "England", "Striker", "Tottenham legend"),
    _fp("Bruno Fernandes", "Manchester United", "Portugal", "Midfielder", "Penalty specialist"),
    _fp("Phil Foden", "Manchester City", "England", "Midfielder", "Stockport Iniesta"),
    _fp("Bukayo Saka", "Arsenal", "England", "Winger", "Starboy"),
    _fp("Jamal Musiala", "Bayern Munich", "Germany", "Midfielder", "Bambi"),
    _fp("Pedri", "Barcelona", "Spain", "Midfielder", "La Masia gem"),
    _fp("Rodri", "Manchester City", "Spain", "Midfielder", "2024 Ballon d'Or"),
    _fp("Florian Wirtz", "Bayer Leverkusen", "Germany", "Midfielder", "Wonderkid"),
    _fp("Cole Palmer", "Chelsea", "England", "Midfielder", "Cold Palmer"),
    _fp("Virgil van Dijk", "Liverpool", "Netherlands", "Defender", "The Colossus"),
    _fp("Thibaut Courtois", "Real Madrid", "Belgium", "Goalkeeper", "UCL final hero"),
    _fp("Manuel Neuer", "Bayern Munich", "Germany", "Goalkeeper", "Sweeper keeper"),
    _fp("Alisson Becker", "Liverpool", "Brazil", "Goalkeeper", "Brazilian wall"),
    _fp("Martin Ødegaard", "Arsenal", "Norway", "Midfielder", "Young captain"),
    _fp("Declan Rice", "Arsenal", "England", "Midfielder", "West Ham legend"),
    _fp("Son Heung-min", "Tottenham", "South Korea", "Forward", "Sonny"),
    _fp("Lamine Yamal", "Barcelona", "Spain", "Winger", "Euro 2024 star at 16"),
    _fp("Gavi", "Barcelona", "Spain", "Midfielder", "Golden Boy 2022"),
    _fp("Federico Valverde", "Real Madrid", "Uruguay", "Midfielder", "The engine"),
]

LEGENDS: List[FootballPlayer] = [
    _fp("Diego Maradona", "Napoli (Legend)", "Argentina", "Forward", "Hand of God"),
    _fp("Pelé", "Santos (Legend)", "Brazil", "Forward", "O Rei - 3 World Cups"),
    _fp("Zinedine Zidane", "Real Madrid (Legend)", "France", "Midfielder", "The Headbutt"),
    _fp("Ronaldinho", "Barcelona (Legend)", "Brazil", "Forward", "Smile and elastico"),
    _fp("Thierry Henry", "Arsenal (Legend)", "France", "Forward", "Va Va Voom"),
    _fp("Ronaldo Nazário", "Real Madrid (Legend)", "Brazil", "Striker", "Il Fenomeno"),
    _fp("Andrea Pirlo", "Juventus (Legend)", "Italy", "Midfielder", "The Architect"),
    _fp("David Beckham", "Manchester United (Legend)", "England", "Midfielder", "Bend it like..."),
    _fp("Wayne Rooney", "Manchester United (Legend)", "England", "Forward", "Remember the name"),
    _fp("Steven Gerrard", "Liverpool (Legend)", "England", "Midfielder", "Istanbul 2005"),
    _fp("Frank Lampard", "Chelsea (Legend)", "England", "Midfielder", "Super Frank"),
    _fp("Xavi Hernández", "Barcelona (Legend)", "Spain", "Midfielder", "Tiki-taka master"),
    _fp("Andrés Iniesta", "Barcelona (Legend)", "Spain", "Midfielder", "2010 World Cup winner"),
    _fp("Paolo Maldini", "AC Milan (Legend)", "Italy", "Defender", "25 years, one club"),
    _fp("Roberto Carlos", "Real Madrid (Legend)", "Brazil", "Left Back", "Impossible free kick"),
    _fp("Kaká", "AC Milan (Legend)", "Brazil", "Midfielder", "2007 Ballon d'Or"),
    _fp("Alessandro Del Piero", "Juventus (Legend)", "Italy", "Forward", "Il Capitano"),
    _fp("Gianluigi Buffon", "Juventus (Legend)", "Italy", "Goalkeeper", "Most expensive keeper of his era"),
    _fp("Zlatan Ibrahimović", "AC Milan (Legend)", "Sweden", "Striker", "God of confidence"),
    _fp("Samuel Eto'o", "Barcelona (Legend)", "Cameroon", "Striker", "African great"),
    _fp("Patrick Vieira", "Arsenal (Legend)", "France", "Midfielder", "Invincible captain"),
    _fp("Dennis Bergkamp", "Arsenal (Legend)", "Netherlands", "Forward", "The Iceman"),
    _fp("Johan Cruyff", "Barcelona (Legend)", "Netherlands", "Forward", "Total Football"),
    _fp("George Best", "Manchester United (Legend)", "Northern Ireland", "Winger", "5th Beatle"),
    _fp("Eric Cantona", "Manchester United (Legend)", "France", "Forward", "The King"),
    _fp("Didier Drogba", "Chelsea (Legend)", "Ivory Coast", "Striker", "Big game player"),
    _fp("Sergio Ramos", "Real Madrid (Legend)", "Spain", "Defender", "Last minute headers"),
    _fp("Iker Casillas", "Real Madrid (Legend)", "Spain", "Goalkeeper", "San Iker"),
    _fp("Carles Puyol", "Barcelona (Legend)", "Spain", "Defender", "The Captain"),
    _fp("Francesco Totti", "AS Roma (Legend)", "Italy", "Forward", "Il Capitano of Rome"),
]

ALL_CURATED: List[FootballPlayer] = CURRENT_STARS + LEGENDS

__all__ = ["CLUBS", "CLUBS_BY_ID", "CURRENT_STARS", "LEGENDS", "ALL_CURATED"]
