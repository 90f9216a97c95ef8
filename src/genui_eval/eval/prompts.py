"""Evaluation prompt catalog.

Each prompt names the message kind a model must produce and, for component
updates, the content the generated tree is expected to contain.
"""

from pydantic import BaseModel, ConfigDict, Field

from ..schema import ContentMatcher, MessageKind


class EvalPrompt(BaseModel):
    """One evaluation prompt."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    description: str = ""
    kind: MessageKind
    prompt_text: str = Field(..., min_length=1)
    matchers: tuple[ContentMatcher, ...] = ()


def _expect(*specs: str) -> tuple[ContentMatcher, ...]:
    return tuple(ContentMatcher.parse(spec) for spec in specs)


PROMPTS: tuple[EvalPrompt, ...] = (
    EvalPrompt(
        name="dogBreedGenerator",
        description="A prompt to generate a UI for a dog breed information and generator tool.",
        kind=MessageKind.COMPONENT_UPDATE,
        prompt_text="""Generate a JSON conforming to the schema to describe the following UI:

A root node has already been created with ID "root". You need to create a ComponentUpdate message now.

A vertical list with:
Dog breed information
Dog generator

The dog breed information is a card, which contains a title "Famous Dog breeds", a header image, and a carousel of different dog breeds. The carousel information should be in the data model at /carousel.

The dog generator is another card which is a form that generates a fictional dog breed with a description
- Title
- Description text explaining what it is
- Dog breed name (text input)
- Number of legs (number input)
- Skills (checkboxes)
- Button called "Generate" which takes the data above and generates a new dog description
- A divider
- A section which shows the generated content
""",
        matchers=_expect(
            "Card",
            "Image",
            "TextField:label:Dog breed name",
            "TextField:label:Number of legs",
            "Button:label:Generate",
            "Divider",
        ),
    ),
    EvalPrompt(
        name="loginForm",
        description='A simple login form with username, password, a "remember me" checkbox, and a submit button.',
        kind=MessageKind.COMPONENT_UPDATE,
        prompt_text=(
            'Generate a JSON ComponentUpdate message for a login form. It should have a "Login" heading, '
            "two text fields for username and password (bound to /login/username and /login/password), "
            'a checkbox for "Remember Me" (bound to /login/rememberMe), and a "Sign In" button. '
            "The button should trigger a 'login' action, passing the username, password, and rememberMe "
            "status in the dynamicContext."
        ),
        matchers=_expect(
            "Heading:text:Login",
            "TextField:label:username",
            "TextField:label:password",
            "CheckBox:label:Remember Me",
            "Button:label:Sign In",
        ),
    ),
    EvalPrompt(
        name="productGallery",
        description="A gallery of products using a list with a template.",
        kind=MessageKind.COMPONENT_UPDATE,
        prompt_text=(
            "Generate a JSON ComponentUpdate message for a product gallery. It should display a list of "
            "products from the data model at '/products'. Use a template for the list items. Each item "
            "should be a Card containing an Image (from '/products/item/imageUrl'), a Text component for "
            "the product name (from '/products/item/name'), and a Button labeled \"Add to Cart\". The "
            "button's action should be 'addToCart' and include a staticContext with the product ID, for "
            "example, 'productId': 'product123'. You should create a template component and then a list "
            "that uses it."
        ),
        matchers=_expect(
            "List",
            "Card",
            "Image",
            "Text:text:name",
            "Button:label:Add to Cart",
        ),
    ),
    EvalPrompt(
        name="settingsPage",
        description="A settings page with tabs and a modal dialog.",
        kind=MessageKind.COMPONENT_UPDATE,
        prompt_text=(
            "Generate a JSON ComponentUpdate message for a user settings page. Use a Tabs component with "
            'two tabs: "Profile" and "Notifications". The "Profile" tab should contain a simple column '
            "with a text field for the user's name. The \"Notifications\" tab should contain a checkbox "
            'for "Enable email notifications". Also, include a Modal component. The modal\'s entry point '
            'should be a button labeled "Delete Account", and its content should be a column with a '
            'confirmation text and two buttons: "Confirm Deletion" and "Cancel".'
        ),
        matchers=_expect(
            "Tabs",
            "TextField:label:name",
            "CheckBox:label:Enable email notifications",
            "Modal",
            "Button:label:Delete Account",
            "Button:label:Confirm Deletion",
            "Button:label:Cancel",
        ),
    ),
    EvalPrompt(
        name="streamHeader",
        description="A StreamHeader message to initialize the UI stream.",
        kind=MessageKind.STREAM_HEADER,
        prompt_text=(
            "Generate a JSON StreamHeader message. This is the very first message in a UI stream, used "
            'to establish the protocol version. The version should be "1.0.0".'
        ),
    ),
    EvalPrompt(
        name="dataModelUpdate",
        description="A DataModelUpdate message to update user data.",
        kind=MessageKind.DATA_MODEL_UPDATE,
        prompt_text=(
            "Generate a JSON DataModelUpdate message. This is used to update the client's data model. "
            "The scenario is that a user has just logged in, and we need to populate their profile "
            "information. Create a single data model update message to set '/user/name' to \"John Doe\" "
            "and '/user/email' to \"john.doe@example.com\"."
        ),
    ),
    EvalPrompt(
        name="uiRoot",
        description="A UIRoot message to set the initial UI and data roots.",
        kind=MessageKind.BEGIN_RENDERING,
        prompt_text=(
            "Generate a JSON UIRoot message. This message tells the client where to start rendering the "
            "UI and where the root of the data model is. Set the UI root to a component with ID "
            '"mainLayout" and the data model root to a node with ID "dataRoot".'
        ),
    ),
    EvalPrompt(
        name="animalKingdomExplorer",
        description="A simple, explicit UI to display a hierarchy of animals.",
        kind=MessageKind.COMPONENT_UPDATE,
        prompt_text="""Generate a JSON ComponentUpdate message for a simplified UI explorer for the Animal Kingdom.

The UI must have a main 'Heading' with the text "Simple Animal Explorer".

Below the heading, create a 'Tabs' component with exactly three tabs: "Mammals", "Birds", and "Reptiles".

Each tab's content should be a 'Column'. The first item in each column must be a 'TextField' with the label "Search...". Below the search field, display the hierarchy for that tab using nested 'Card' components.

The exact hierarchy to create is as follows:

**1. "Mammals" Tab:**
   - A 'Card' for the Class "Mammalia".
   - Inside the "Mammalia" card, create two 'Card's for the following Orders:
     - A 'Card' for the Order "Carnivora". Inside this, create 'Card's for these three species: "Lion", "Tiger", "Wolf".
     - A 'Card' for the Order "Artiodactyla". Inside this, create 'Card's for these two species: "Giraffe", "Hippopotamus".

**2. "Birds" Tab:**
   - A 'Card' for the Class "Aves".
   - Inside the "Aves" card, create three 'Card's for the following Orders:
     - A 'Card' for the Order "Accipitriformes". Inside this, create a 'Card' for the species: "Bald Eagle".
     - A 'Card' for the Order "Struthioniformes". Inside this, create a 'Card' for the species: "Ostrich".
     - A 'Card' for the Order "Sphenisciformes". Inside this, create a 'Card' for the species: "Penguin".

**3. "Reptiles" Tab:**
   - A 'Card' for the Class "Reptilia".
   - Inside the "Reptilia" card, create two 'Card's for the following Orders:
     - A 'Card' for the Order "Crocodilia". Inside this, create a 'Card' for the species: "Nile Crocodile".
     - A 'Card' for the Order "Squamata". Inside this, create 'Card's for these two species: "Komodo Dragon", "Ball Python".

Each species card must contain a 'Row' with an 'Image' and a 'Text' component for the species name. Do not add any other components.

Each Class and Order card must contain a 'Column' with a 'Text' component with the name, and then the children cards below.

IMPORTANT: Do not skip any of the classes, orders, or species above. Include every item that is mentioned.
""",
        matchers=_expect(
            "Heading:text:Simple Animal Explorer",
            "Tabs",
            "TextField:label:Search...",
            # Mammals
            "Text:text:Mammalia",
            "Text:text:Carnivora",
            "Text:text:Lion",
            "Text:text:Tiger",
            "Text:text:Wolf",
            "Text:text:Artiodactyla",
            "Text:text:Giraffe",
            "Text:text:Hippopotamus",
            # Birds
            "Text:text:Aves",
            "Text:text:Accipitriformes",
            "Text:text:Bald Eagle",
            "Text:text:Struthioniformes",
            "Text:text:Ostrich",
            "Text:text:Sphenisciformes",
            "Text:text:Penguin",
            # Reptiles
            "Text:text:Reptilia",
            "Text:text:Crocodilia",
            "Text:text:Nile Crocodile",
            "Text:text:Squamata",
            "Text:text:Komodo Dragon",
            "Text:text:Ball Python",
        ),
    ),
    EvalPrompt(
        name="recipeCard",
        description="A UI to display a recipe with ingredients and instructions.",
        kind=MessageKind.COMPONENT_UPDATE,
        prompt_text=(
            "Generate a JSON ComponentUpdate message for a recipe card. It should have a 'Heading' for "
            "the recipe title, \"Classic Lasagna\". Below the title, an 'Image' of the lasagna. Then, a "
            "'Row' containing two 'Column's. The first column has a 'Text' heading \"Ingredients\" and a "
            "'List' of ingredients. The second column has a 'Text' heading \"Instructions\" and a 'List' "
            "of step-by-step instructions. Finally, a 'Button' at the bottom labeled \"Watch Video Tutorial\"."
        ),
        matchers=_expect(
            "Heading:text:Classic Lasagna",
            "Image",
            "Text:text:Ingredients",
            "List",
            "Text:text:Instructions",
            "Button:label:Watch Video Tutorial",
        ),
    ),
    EvalPrompt(
        name="musicPlayer",
        description="A simple music player UI.",
        kind=MessageKind.COMPONENT_UPDATE,
        prompt_text=(
            "Generate a JSON ComponentUpdate message for a music player. It should be a 'Card' containing "
            "a 'Column'. Inside the column, there's an 'Image' for the album art, a 'Text' for the song "
            "title \"Bohemian Rhapsody\", another 'Text' for the artist \"Queen\", a 'Slider' for the song "
            "progress, and a 'Row' with three 'Button's: \"Previous\", \"Play\", and \"Next\"."
        ),
        matchers=_expect(
            "Card",
            "Image",
            "Text:text:Bohemian Rhapsody",
            "Text:text:Queen",
            "Slider",
            "Button:label:Previous",
            "Button:label:Play",
            "Button:label:Next",
        ),
    ),
    EvalPrompt(
        name="weatherForecast",
        description="A UI to display the weather forecast.",
        kind=MessageKind.COMPONENT_UPDATE,
        prompt_text=(
            "Generate a JSON ComponentUpdate message for a weather forecast UI. It should have a "
            "'Heading' with the city name, \"New York\". Below it, a 'Row' with the current temperature "
            "as a 'Text' component (\"68°F\") and an 'Image' for the weather icon (e.g., a sun). Below "
            "that, a 'Divider'. Then, a 'List' component to display the 5-day forecast. Each item in the "
            "list should be a 'Row' with the day, an icon, and high/low temperatures."
        ),
        matchers=_expect(
            "Heading:text:New York",
            "Text:text:68°F",
            "Image",
            "Divider",
            "List",
        ),
    ),
    EvalPrompt(
        name="surveyForm",
        description="A customer feedback survey form.",
        kind=MessageKind.COMPONENT_UPDATE,
        prompt_text=(
            "Generate a JSON ComponentUpdate message for a survey form. It should have a 'Heading' "
            "\"Customer Feedback\". Then a 'MultipleChoice' question \"How would you rate our service?\" "
            "with options \"Excellent\", \"Good\", \"Average\", \"Poor\". Then a 'CheckBox' section for "
            "\"What did you like?\" with options \"Product Quality\", \"Price\", \"Customer Support\". "
            "Finally, a 'TextField' with the label \"Any other comments?\" and a 'Button' labeled "
            "\"Submit Feedback\"."
        ),
        matchers=_expect(
            "Heading:text:Customer Feedback",
            "MultipleChoice",
            "CheckBox",
            "TextField:label:Any other comments?",
            "Button:label:Submit Feedback",
        ),
    ),
    EvalPrompt(
        name="flightBooker",
        description="A form to search for flights.",
        kind=MessageKind.COMPONENT_UPDATE,
        prompt_text=(
            "Generate a JSON ComponentUpdate message for a flight booking form. It should have a "
            "'Heading' \"Book a Flight\". Use a 'Row' for two 'TextField's: \"Departure City\" and "
            "\"Arrival City\". Below that, another 'Row' for two 'DateTimeInput's: \"Departure Date\" and "
            "\"Return Date\". Add a 'CheckBox' for \"One-way trip\". Finally, a 'Button' labeled "
            "\"Search Flights\"."
        ),
        matchers=_expect(
            "Heading:text:Book a Flight",
            "TextField:label:Departure City",
            "TextField:label:Arrival City",
            "DateTimeInput",
            "CheckBox:label:One-way trip",
            "Button:label:Search Flights",
        ),
    ),
    EvalPrompt(
        name="dashboard",
        description="A simple dashboard with statistics.",
        kind=MessageKind.COMPONENT_UPDATE,
        prompt_text=(
            "Generate a JSON ComponentUpdate message for a simple dashboard. It should have a 'Heading' "
            "\"Sales Dashboard\". Below, a 'Row' containing three 'Card's. The first card has a 'Text' "
            "\"Revenue\" and another 'Text' \"$50,000\". The second card has \"New Customers\" and "
            "\"1,200\". The third card has \"Conversion Rate\" and \"4.5%\"."
        ),
        matchers=_expect(
            "Heading:text:Sales Dashboard",
            "Card",
            "Text:text:Revenue",
            "Text:text:$50,000",
            "Text:text:New Customers",
            "Text:text:1,200",
            "Text:text:Conversion Rate",
            "Text:text:4.5%",
        ),
    ),
    EvalPrompt(
        name="contactCard",
        description="A UI to display contact information.",
        kind=MessageKind.COMPONENT_UPDATE,
        prompt_text=(
            "Generate a JSON ComponentUpdate message for a contact card. It should be a 'Card' with a "
            "'Row'. The row contains an 'Image' (as an avatar) and a 'Column'. The column contains a "
            "'Text' for the name \"Jane Doe\", a 'Text' for the email \"jane.doe@example.com\", and a "
            "'Text' for the phone number \"(123) 456-7890\". Below the main row, add a 'Button' labeled "
            "\"View on Map\"."
        ),
        matchers=_expect(
            "Card",
            "Image",
            "Text:text:Jane Doe",
            "Text:text:jane.doe@example.com",
            "Text:text:(123) 456-7890",
            "Button:label:View on Map",
        ),
    ),
    EvalPrompt(
        name="calendarEventCreator",
        description="A form to create a new calendar event.",
        kind=MessageKind.COMPONENT_UPDATE,
        prompt_text=(
            "Generate a JSON ComponentUpdate message for a calendar event creation form. It should have "
            "a 'Heading' \"New Event\". Include a 'TextField' for the \"Event Title\". Use a 'Row' for "
            "two 'DateTimeInput's for \"Start Time\" and \"End Time\". Add a 'CheckBox' labeled "
            "\"All-day event\". Finally, a 'Row' with two 'Button's: \"Save\" and \"Cancel\"."
        ),
        matchers=_expect(
            "Heading:text:New Event",
            "TextField:label:Event Title",
            "DateTimeInput",
            "CheckBox:label:All-day event",
            "Button:label:Save",
            "Button:label:Cancel",
        ),
    ),
    EvalPrompt(
        name="checkoutPage",
        description="A simplified e-commerce checkout page.",
        kind=MessageKind.COMPONENT_UPDATE,
        prompt_text=(
            "Generate a JSON ComponentUpdate message for a checkout page. It should have a 'Heading' "
            "\"Checkout\". Create a 'Column' for \"Shipping Information\" with 'TextField's for "
            "\"Full Name\" and \"Address\". Create another 'Column' for \"Payment Information\" with "
            "'TextField's for \"Card Number\" and \"Expiry Date\". Add a 'Divider'. Show an order "
            "summary with a 'Text' component: \"Total: $99.99\". Finally, a 'Button' labeled "
            "\"Place Order\"."
        ),
        matchers=_expect(
            "Heading:text:Checkout",
            "TextField:label:Full Name",
            "TextField:label:Address",
            "TextField:label:Card Number",
            "TextField:label:Expiry Date",
            "Divider",
            "Text:text:Total: $99.99",
            "Button:label:Place Order",
        ),
    ),
    EvalPrompt(
        name="socialMediaPost",
        description="A component representing a social media post.",
        kind=MessageKind.COMPONENT_UPDATE,
        prompt_text=(
            "Generate a JSON ComponentUpdate message for a social media post. It should be a 'Card' "
            "containing a 'Column'. The first item is a 'Row' with an 'Image' (user avatar) and a 'Text' "
            "(username \"user123\"). Below that, a 'Text' component for the post content: \"Enjoying the "
            "beautiful weather today!\". Then, an 'Image' for the main post picture. Finally, a 'Row' "
            "with three 'Button's: \"Like\", \"Comment\", and \"Share\"."
        ),
        matchers=_expect(
            "Card",
            "Text:text:user123",
            "Text:text:Enjoying the beautiful weather today!",
            "Image",
            "Button:label:Like",
            "Button:label:Comment",
            "Button:label:Share",
        ),
    ),
    EvalPrompt(
        name="eCommerceProductPage",
        description="A detailed product page for an e-commerce website.",
        kind=MessageKind.COMPONENT_UPDATE,
        prompt_text="""Generate a JSON ComponentUpdate message for a product details page.
The main layout should be a 'Row'.
The left side of the row is a 'Column' containing a large main 'Image' of the product, and below it, a 'Row' of three smaller thumbnail 'Image' components.
The right side of the row is another 'Column' for product information:
- A 'Heading' for the product name, "Premium Leather Jacket".
- A 'Text' component for the price, "$299.99".
- A 'Divider'.
- A 'Text' heading "Select Size", followed by a 'MultipleChoice' component with options "S", "M", "L", "XL".
- A 'Text' heading "Select Color", followed by another 'MultipleChoice' component with options "Black", "Brown", "Red".
- A 'Button' with the label "Add to Cart".
- A 'Text' component for the product description below the button.""",
        matchers=_expect(
            "Heading:text:Premium Leather Jacket",
            "Text:text:$299.99",
            "Image",
            "MultipleChoice",  # size
            "MultipleChoice",  # color
            "Button:label:Add to Cart",
            "Divider",
        ),
    ),
    EvalPrompt(
        name="interactiveDashboard",
        description="A dashboard with filters and data cards.",
        kind=MessageKind.COMPONENT_UPDATE,
        prompt_text="""Generate a JSON ComponentUpdate message for an interactive analytics dashboard.
At the top, a 'Heading' "Company Dashboard".
Below the heading, a 'Card' containing a 'Row' of filter controls:
- A 'DateTimeInput' with a label for "Start Date".
- A 'DateTimeInput' with a label for "End Date".
- A 'Button' labeled "Apply Filters".
Below the filters card, a 'Row' containing two 'Card's for key metrics:
- The first 'Card' has a 'Heading' "Total Revenue" and a 'Text' component showing "$1,234,567".
- The second 'Card' has a 'Heading' "New Users" and a 'Text' component showing "4,321".
Finally, a large 'Card' at the bottom with a 'Heading' "Revenue Over Time" and a placeholder 'Image' to represent a line chart.""",
        matchers=_expect(
            "Heading:text:Company Dashboard",
            "DateTimeInput",
            "Button:label:Apply Filters",
            "Heading:text:Total Revenue",
            "Text:text:$1,234,567",
            "Heading:text:New Users",
            "Text:text:4,321",
            "Heading:text:Revenue Over Time",
            "Image",
        ),
    ),
    EvalPrompt(
        name="travelItinerary",
        description="A multi-day travel itinerary display.",
        kind=MessageKind.COMPONENT_UPDATE,
        prompt_text="""Generate a JSON ComponentUpdate message for a travel itinerary for a trip to Paris.
It should have a main 'Heading' "Paris Adventure".
Below, use a 'List' to display three days. Each item in the list should be a 'Card'.
- The first 'Card' (Day 1) should contain a 'Heading' "Day 1: Arrival & Eiffel Tower", and a 'List' of activities for that day: "Check into hotel", "Lunch at a cafe", "Visit the Eiffel Tower".
- The second 'Card' (Day 2) should contain a 'Heading' "Day 2: Museums & Culture", and a 'List' of activities: "Visit the Louvre Museum", "Walk through Tuileries Garden", "See the Arc de Triomphe".
- The third 'Card' (Day 3) should contain a 'Heading' "Day 3: Art & Departure", and a 'List' of activities: "Visit Musée d'Orsay", "Explore Montmartre", "Depart from CDG".
Each activity in the inner lists should be a 'Row' containing a 'CheckBox' (to mark as complete) and a 'Text' component with the activity description.""",
        matchers=_expect(
            "Heading:text:Paris Adventure",
            "Heading:text:Day 1: Arrival & Eiffel Tower",
            "Heading:text:Day 2: Museums & Culture",
            "Heading:text:Day 3: Art & Departure",
            "List",
            "CheckBox",
            "Text:text:Visit the Eiffel Tower",
            "Text:text:Visit the Louvre Museum",
            "Text:text:Explore Montmartre",
        ),
    ),
)


def get_prompt(name: str) -> EvalPrompt:
    """Look up a prompt by exact name."""
    for prompt in PROMPTS:
        if prompt.name == name:
            return prompt
    raise LookupError(f'No prompt named "{name}".')


def filter_prompts(prefix: str | None = None) -> list[EvalPrompt]:
    """
    Select prompts whose name starts with prefix.

    Raises:
        LookupError: If a prefix is given and nothing matches
    """
    if not prefix:
        return list(PROMPTS)
    selected = [prompt for prompt in PROMPTS if prompt.name.startswith(prefix)]
    if not selected:
        raise LookupError(f'No prompt found with prefix "{prefix}".')
    return selected
