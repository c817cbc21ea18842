"""CSS selectors for the EaseMyTrip booking pages."""

LOCATORS = {
    # Home page
    'flight_tab': '#homepagemenuUL > li:nth-child(1) > a',
    'from_city': '#FromSector_show',
    'from_city_dropdown': '#a_FromSector_show',
    'from_autofill': '#fromautoFill',
    'to_city': '#a_Editbox13_show',
    'to_city_dropdown': '#a_Editbox13_show',
    'to_autofill': '#toautoFill',
    'date_tiles': '.box .days ul li span',
    'search_button': '#divSearchFlight',

    # Results page
    'flight_list': '#ResultDiv > div > div > div:nth-child(4) > div:nth-child(2)',
    'first_flight': (
        '#ResultDiv > div > div > div:nth-child(4) > div:nth-child(2) > div:nth-child(1)'
        ' > div:nth-child(1) > div:nth-child(6) > button:nth-child(1)'
    ),

    # Review page / fare summary
    'promo_code': '#txtCouponCode',
    'clear_promo_code': '#divCouponApplied > div:nth-child(2) > div',
    'apply_promo_code': '#divCouponCodeApply > div:nth-child(2) > div',
    'promo_message': '#easeFareDetails1_promodiv',
    'grand_total': '#spnGrndTotal',
    'discount': '#spnCouponDst',
}
